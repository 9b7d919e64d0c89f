"""Calendar dates with day arithmetic and comparison."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

_DIAS_POR_MES = {
    1: 31,
    3: 31,
    4: 30,
    5: 31,
    6: 30,
    7: 31,
    8: 31,
    9: 30,
    10: 31,
    11: 30,
    12: 31,
}


def es_bisiesto(anio: int) -> bool:
    """Return whether ``anio`` is a leap year in the Gregorian calendar."""
    return anio % 400 == 0 or (anio % 4 == 0 and anio % 100 != 0)


def dias_mes(mes: int, anio: int) -> int:
    """Return the number of days of ``mes`` in ``anio``; 0 for an invalid month."""
    if mes == 2:
        return 29 if es_bisiesto(anio) else 28
    return _DIAS_POR_MES.get(mes, 0)


@total_ordering
@dataclass
class Fecha:
    """A mutable date printed as ``d/m/a``."""

    dia: int
    mes: int
    anio: int

    def aumentar(self, dias: int) -> None:
        """Move the date ``dias`` days forward."""
        if dias < 0:
            raise ValueError("la cantidad de días no puede ser negativa")
        self.dia += dias
        while self.dia > dias_mes(self.mes, self.anio):
            self.dia -= dias_mes(self.mes, self.anio)
            self.mes += 1
            if self.mes > 12:
                self.mes = 1
                self.anio += 1

    def _clave(self) -> tuple[int, int, int]:
        return (self.anio, self.mes, self.dia)

    def comparar(self, otra: Fecha) -> int:
        """Return 1 if this date is later than ``otra``, -1 if earlier, 0 if equal."""
        a, b = self._clave(), otra._clave()
        return (a > b) - (a < b)

    def __lt__(self, otra: object) -> bool:
        if not isinstance(otra, Fecha):
            return NotImplemented
        return self.comparar(otra) < 0

    def __str__(self) -> str:
        return f"{self.dia}/{self.mes}/{self.anio}"

    @classmethod
    def parse(cls, texto: str) -> Fecha:
        """Build a date from text of the form ``dd/mm/aaaa``."""
        partes = texto.strip().split("/")
        if len(partes) != 3 or not all(p.isascii() and p.isdigit() for p in partes):
            raise ValueError(f"fecha inválida: {texto!r}")
        dia, mes, anio = (int(p) for p in partes)
        return cls(dia, mes, anio)