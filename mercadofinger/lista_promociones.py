"""Lists of promotions ordered by start date."""

from __future__ import annotations

import heapq
from bisect import bisect_left
from typing import Callable, Iterable, Iterator

from mercadofinger.fecha import Fecha
from mercadofinger.promocion import Promocion


def _inicio(promocion: Promocion) -> Fecha:
    return promocion.fecha_inicio


class ListaPromociones:
    """Promotions kept in ascending order of start date.

    Iteration yields the promotions in that order.
    """

    def __init__(self) -> None:
        self._promociones: list[Promocion] = []

    @classmethod
    def _desde(cls, promociones: Iterable[Promocion]) -> ListaPromociones:
        lista = cls()
        lista._promociones = list(promociones)
        return lista

    def __len__(self) -> int:
        return len(self._promociones)

    def __iter__(self) -> Iterator[Promocion]:
        return iter(self._promociones)

    def agregar(self, promocion: Promocion) -> None:
        """Insert ``promocion`` by start date.

        A promotion goes before the existing ones with the same start date,
        except that one tied with the first promotion goes right after it.
        """
        if self.pertenece(promocion.id):
            raise ValueError(f"la promoción {promocion.id} ya está en la lista")
        if not self._promociones or promocion.fecha_inicio < self._promociones[0].fecha_inicio:
            posicion = 0
        else:
            posicion = bisect_left(self._promociones, promocion.fecha_inicio, lo=1, key=_inicio)
        self._promociones.insert(posicion, promocion)

    def formatear(self) -> str:
        """Return the printed form of every promotion in order."""
        return "".join(promocion.formatear() for promocion in self._promociones)

    def es_vacia(self) -> bool:
        """Return whether the list holds no promotions."""
        return not self._promociones

    def pertenece(self, id_promocion: int) -> bool:
        """Return whether a promotion with ``id_promocion`` is in the list."""
        return any(p.id == id_promocion for p in self._promociones)

    def obtener(self, id_promocion: int) -> Promocion:
        """Return the promotion with ``id_promocion``; raise ``KeyError`` if absent."""
        for promocion in self._promociones:
            if promocion.id == id_promocion:
                return promocion
        raise KeyError(id_promocion)

    def _extraer(self, condicion: Callable[[Promocion], bool]) -> ListaPromociones:
        extraidas = [p for p in self._promociones if condicion(p)]
        self._promociones = [p for p in self._promociones if not condicion(p)]
        return ListaPromociones._desde(extraidas)

    def extraer_finalizadas(self, fecha: Fecha) -> ListaPromociones:
        """Remove and return, in order, the promotions that ended before ``fecha``."""
        return self._extraer(lambda p: p.fecha_fin < fecha)

    def extraer_activas(self, fecha: Fecha) -> ListaPromociones:
        """Remove and return, in order, the promotions active on ``fecha``."""
        return self._extraer(lambda p: p.fecha_inicio <= fecha <= p.fecha_fin)

    def es_compatible(self, promocion: Promocion) -> bool:
        """Return whether ``promocion`` is compatible with every promotion listed.

        An empty list is never compatible.
        """
        if not self._promociones:
            return False
        return all(p.compatible_con(promocion) for p in self._promociones)

    def unir(self, otra: ListaPromociones) -> ListaPromociones:
        """Return a new list merging both by start date, this list first on ties.

        The promotions themselves are shared, not copied.
        """
        return ListaPromociones._desde(heapq.merge(self, otra, key=_inicio))