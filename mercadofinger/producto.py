"""Store products."""

from __future__ import annotations

from dataclasses import dataclass

from mercadofinger.fecha import Fecha

MAX_NOMBRE_PRODUCTO = 100


@dataclass
class Producto:
    """A product with id, name, price and the date it was stocked."""

    id: int
    nombre: str
    precio: int
    fecha_ingreso: Fecha

    def __post_init__(self) -> None:
        if len(self.nombre) >= MAX_NOMBRE_PRODUCTO:
            raise ValueError(f"el nombre supera {MAX_NOMBRE_PRODUCTO - 1} caracteres")

    def formatear(self) -> str:
        """Return the product's printed form; the date line has no trailing newline."""
        return (
            f"Producto: {self.id}\n"
            f"{self.nombre}\n"
            f"Precio: {self.precio}\n"
            f"Ingresado el: {self.fecha_ingreso}"
        )