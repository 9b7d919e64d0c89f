"""Store data structures (dates, clients, branches, carts, product sets, promotions and their history) and a command interpreter."""

__version__ = "0.1.0"