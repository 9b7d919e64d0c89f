"""Binary search trees of clients keyed by client id."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Iterator

from mercadofinger.cliente import Cliente


@dataclass(slots=True)
class _Nodo:
    cliente: Cliente
    izq: _Nodo | None = None
    der: _Nodo | None = None


class ClientesABB:
    """A group of clients kept in a binary search tree ordered by id.

    Iteration yields the clients in ascending id order.
    """

    def __init__(self) -> None:
        self._raiz: _Nodo | None = None
        self._cantidad = 0

    def __len__(self) -> int:
        return self._cantidad

    def __iter__(self) -> Iterator[Cliente]:
        pila: list[_Nodo] = []
        actual = self._raiz
        while pila or actual is not None:
            while actual is not None:
                pila.append(actual)
                actual = actual.izq
            nodo = pila.pop()
            yield nodo.cliente
            actual = nodo.der

    def __contains__(self, id_cliente: object) -> bool:
        return isinstance(id_cliente, int) and self.existe(id_cliente)

    def insertar(self, cliente: Cliente) -> None:
        """Add ``cliente``; its id must not already be in the group."""
        nuevo = _Nodo(cliente)
        if self._raiz is None:
            self._raiz = nuevo
        else:
            actual = self._raiz
            while True:
                if cliente.id == actual.cliente.id:
                    raise ValueError(f"el cliente {cliente.id} ya está en el grupo")
                if cliente.id > actual.cliente.id:
                    if actual.der is None:
                        actual.der = nuevo
                        break
                    actual = actual.der
                else:
                    if actual.izq is None:
                        actual.izq = nuevo
                        break
                    actual = actual.izq
        self._cantidad += 1

    def formatear(self) -> str:
        """Return the printed form of every client in ascending id order."""
        return "".join(cliente.formatear() for cliente in self)

    def _buscar(self, id_cliente: int) -> tuple[_Nodo | None, _Nodo | None]:
        padre = None
        actual = self._raiz
        while actual is not None and actual.cliente.id != id_cliente:
            padre = actual
            actual = actual.der if id_cliente > actual.cliente.id else actual.izq
        return padre, actual

    def existe(self, id_cliente: int) -> bool:
        """Return whether a client with ``id_cliente`` is in the group."""
        return self._buscar(id_cliente)[1] is not None

    def obtener(self, id_cliente: int) -> Cliente:
        """Return the client with ``id_cliente``; raise ``KeyError`` if absent."""
        nodo = self._buscar(id_cliente)[1]
        if nodo is None:
            raise KeyError(id_cliente)
        return nodo.cliente

    def altura(self) -> int:
        """Return the number of levels of the tree; 0 when empty."""
        nivel = [self._raiz] if self._raiz is not None else []
        altura = 0
        while nivel:
            altura += 1
            nivel = [h for n in nivel for h in (n.izq, n.der) if h is not None]
        return altura

    def max_id(self) -> Cliente:
        """Return the client with the largest id; raise ``ValueError`` if empty."""
        if self._raiz is None:
            raise ValueError("el grupo es vacío")
        actual = self._raiz
        while actual.der is not None:
            actual = actual.der
        return actual.cliente

    def _reemplazar(self, padre: _Nodo | None, nodo: _Nodo, hijo: _Nodo | None) -> None:
        if padre is None:
            self._raiz = hijo
        elif padre.izq is nodo:
            padre.izq = hijo
        else:
            padre.der = hijo

    def remover(self, id_cliente: int) -> None:
        """Remove the client with ``id_cliente``; do nothing if absent.

        A node with two children takes the client with the largest id of its
        left subtree.
        """
        padre, nodo = self._buscar(id_cliente)
        if nodo is None:
            return
        if nodo.izq is not None and nodo.der is not None:
            padre_max, maximo = nodo, nodo.izq
            while maximo.der is not None:
                padre_max, maximo = maximo, maximo.der
            nodo.cliente = maximo.cliente
            self._reemplazar(padre_max, maximo, maximo.izq)
        else:
            self._reemplazar(padre, nodo, nodo.izq if nodo.der is None else nodo.der)
        self._cantidad -= 1

    def edad_promedio(self) -> float:
        """Return the mean age of the clients; 0.0 when the group is empty."""
        if not self._cantidad:
            return 0.0
        return sum(cliente.edad for cliente in self) / self._cantidad

    def nesimo(self, n: int) -> Cliente:
        """Return the ``n``-th client by ascending id, counting from 1."""
        if not 1 <= n <= self._cantidad:
            raise IndexError(f"no hay cliente en la posición {n}")
        return next(islice(self, n - 1, None))