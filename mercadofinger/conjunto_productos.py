"""Bounded sets of product ids."""

from __future__ import annotations

from typing import Iterable, Iterator


class ConjuntoProductos:
    """A set of product ids restricted to ``0 <= id < cant_max``.

    Ids outside that range are silently ignored on insertion and removal.
    """

    def __init__(self, cant_max: int, ids: Iterable[int] = ()) -> None:
        if cant_max < 0:
            raise ValueError("la cantidad máxima no puede ser negativa")
        self._cant_max = cant_max
        self._ids: set[int] = set()
        for id_producto in ids:
            self.insertar(id_producto)

    @property
    def cant_max(self) -> int:
        """The exclusive upper bound of the ids the set can hold."""
        return self._cant_max

    def _en_rango(self, id_producto: int) -> bool:
        return 0 <= id_producto < self._cant_max

    def insertar(self, id_producto: int) -> None:
        """Add ``id_producto`` if it is within range."""
        if self._en_rango(id_producto):
            self._ids.add(id_producto)

    def borrar(self, id_producto: int) -> None:
        """Remove ``id_producto`` if present."""
        self._ids.discard(id_producto)

    def pertenece(self, id_producto: int) -> bool:
        """Return whether ``id_producto`` is in the set."""
        return id_producto in self._ids

    def __contains__(self, id_producto: object) -> bool:
        return id_producto in self._ids

    def es_vacio(self) -> bool:
        """Return whether the set holds no ids."""
        return not self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._ids))

    def formatear(self) -> str:
        """Return the ids in ascending order, each followed by a space, then a newline."""
        return "".join(f"{id_producto} " for id_producto in self) + "\n"

    def union(self, otro: ConjuntoProductos) -> ConjuntoProductos:
        """Return a new set with the ids in either set."""
        return ConjuntoProductos(self._cant_max, self._ids | otro._ids)

    def interseccion(self, otro: ConjuntoProductos) -> ConjuntoProductos:
        """Return a new set with the ids in both sets."""
        return ConjuntoProductos(self._cant_max, self._ids & otro._ids)

    def diferencia(self, otro: ConjuntoProductos) -> ConjuntoProductos:
        """Return a new set with the ids in this set but not in ``otro``."""
        return ConjuntoProductos(self._cant_max, self._ids - otro._ids)