"""Promotion history split into finished, active and upcoming promotions."""

from __future__ import annotations

from dataclasses import dataclass, field

from mercadofinger.fecha import Fecha
from mercadofinger.lista_promociones import ListaPromociones
from mercadofinger.producto import Producto
from mercadofinger.promocion import Promocion


@dataclass
class Historial:
    """The promotions of the store, classified against the current date ``fecha``."""

    fecha: Fecha
    finalizadas: ListaPromociones = field(default_factory=ListaPromociones)
    activas: ListaPromociones = field(default_factory=ListaPromociones)
    futuras: ListaPromociones = field(default_factory=ListaPromociones)

    def _listas(self) -> tuple[ListaPromociones, ListaPromociones, ListaPromociones]:
        return (self.activas, self.finalizadas, self.futuras)

    def agregar_promocion(self, promocion: Promocion) -> None:
        """File ``promocion`` as finished, upcoming or active against the current date."""
        if self.fecha > promocion.fecha_fin:
            self.finalizadas.agregar(promocion)
        elif self.fecha < promocion.fecha_inicio:
            self.futuras.agregar(promocion)
        else:
            self.activas.agregar(promocion)

    def agregar_producto(self, producto: Producto, id_promo: int) -> None:
        """Add ``producto`` to the promotion with ``id_promo``.

        Raises ``KeyError`` if no promotion in the history has that id.
        """
        for lista in self._listas():
            if lista.pertenece(id_promo):
                lista.obtener(id_promo).agregar(producto)
                return
        raise KeyError(id_promo)

    def avanzar_a(self, fecha: Fecha) -> None:
        """Move the current date to ``fecha`` and reclassify the promotions."""
        self.fecha = fecha
        terminadas_activas = self.activas.extraer_finalizadas(fecha)
        terminadas_futuras = self.futuras.extraer_finalizadas(fecha)
        nuevas_activas = self.futuras.extraer_activas(fecha)
        self.finalizadas = terminadas_activas.unir(terminadas_futuras).unir(self.finalizadas)
        self.activas = self.activas.unir(nuevas_activas)

    def formatear_finalizadas(self) -> str:
        """Return the printed form of the finished promotions."""
        return self.finalizadas.formatear()

    def formatear_activas(self) -> str:
        """Return the printed form of the active promotions."""
        return self.activas.formatear()

    def formatear_futuras(self) -> str:
        """Return the printed form of the upcoming promotions."""
        return self.futuras.formatear()

    def es_compatible(self, promocion: Promocion) -> bool:
        """Return whether ``promocion`` is compatible with each of the three lists.

        Since an empty list is never compatible, the result is False while
        any of the lists is empty.
        """
        return all(lista.es_compatible(promocion) for lista in self._listas())