"""Shopping carts holding products ordered by id."""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterator

from mercadofinger.producto import Producto


class CarritoProductos:
    """A cart of products kept in ascending id order.

    Iteration yields the products in that order.
    """

    def __init__(self) -> None:
        self._productos: list[Producto] = []

    def __len__(self) -> int:
        return len(self._productos)

    def __iter__(self) -> Iterator[Producto]:
        return iter(self._productos)

    def __contains__(self, id_producto: object) -> bool:
        return isinstance(id_producto, int) and self.existe(id_producto)

    def _posicion(self, id_producto: int) -> int:
        return bisect_left(self._productos, id_producto, key=lambda p: p.id)

    def insertar(self, producto: Producto) -> None:
        """Add ``producto`` in id order; its id must not already be in the cart."""
        posicion = self._posicion(producto.id)
        if posicion < len(self._productos) and self._productos[posicion].id == producto.id:
            raise ValueError(f"el producto {producto.id} ya está en el carrito")
        self._productos.insert(posicion, producto)

    def formatear(self) -> str:
        """Return the printed form of every product, one after another."""
        return "".join(producto.formatear() for producto in self._productos)

    def es_vacio(self) -> bool:
        """Return whether the cart holds no products."""
        return not self._productos

    def existe(self, id_producto: int) -> bool:
        """Return whether a product with ``id_producto`` is in the cart."""
        return any(producto.id == id_producto for producto in self._productos)

    def obtener(self, id_producto: int) -> Producto:
        """Return the product with ``id_producto``; raise ``KeyError`` if absent."""
        for producto in self._productos:
            if producto.id == id_producto:
                return producto
        raise KeyError(id_producto)

    def remover(self, id_producto: int) -> None:
        """Remove the product with ``id_producto``; do nothing if absent."""
        self._productos = [p for p in self._productos if p.id != id_producto]