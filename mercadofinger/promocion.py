"""Promotions grouping products over a date range."""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field

from mercadofinger.conjunto_productos import ConjuntoProductos
from mercadofinger.fecha import Fecha
from mercadofinger.producto import Producto


@dataclass
class Promocion:
    """A promotion valid from ``fecha_inicio`` to ``fecha_fin``.

    It can hold product ids from 0 up to ``cant_max`` exclusive; other ids
    are ignored.
    """

    id: int
    fecha_inicio: Fecha
    fecha_fin: Fecha
    cant_max: InitVar[int]
    productos: ConjuntoProductos = field(init=False)

    def __post_init__(self, cant_max: int) -> None:
        self.productos = ConjuntoProductos(cant_max)

    def agregar(self, producto: Producto) -> None:
        """Mark ``producto`` as part of the promotion."""
        self.productos.insertar(producto.id)

    def pertenece(self, producto: Producto) -> bool:
        """Return whether ``producto`` is part of the promotion."""
        return self.productos.pertenece(producto.id)

    def formatear(self) -> str:
        """Return the promotion's printed form, two lines ending with a newline."""
        return (
            f"Promocion #{self.id} del {self.fecha_inicio} al {self.fecha_fin}\n"
            f"Productos: {self.productos.formatear()}"
        )

    def compatible_con(self, otra: Promocion) -> bool:
        """Return whether the two promotions never share a product at the same time."""
        if self.productos.interseccion(otra.productos).es_vacio():
            return True
        if self.fecha_inicio < otra.fecha_inicio:
            return self.fecha_fin < otra.fecha_inicio
        return self.fecha_inicio > otra.fecha_fin