"""Token reader over a text stream, following scanf-style reading rules."""

from __future__ import annotations

from typing import Callable, TextIO

_CARACTERES_REAL = frozenset("+-0123456789.eE")


class Lector:
    """Reads words, numbers and line remainders from a text stream.

    Numbers and words skip leading whitespace, including line breaks.
    Reading past the end of the stream raises ``EOFError``, and malformed
    numbers raise ``ValueError``.
    """

    def __init__(self, entrada: TextIO) -> None:
        self._entrada = entrada
        self._linea = ""
        self._pos = 0

    def _mirar(self) -> str:
        if self._pos >= len(self._linea):
            self._linea = self._entrada.readline()
            self._pos = 0
        return self._linea[self._pos : self._pos + 1]

    def _avanzar(self) -> None:
        self._pos += 1

    def _leer_mientras(self, condicion: Callable[[str], bool]) -> str:
        leidos = []
        while (c := self._mirar()) and condicion(c):
            leidos.append(c)
            self._avanzar()
        return "".join(leidos)

    def _saltar_blancos(self) -> None:
        self._leer_mientras(str.isspace)
        if not self._mirar():
            raise EOFError("fin de la entrada")

    def palabra(self) -> str:
        """Return the next run of non-whitespace characters."""
        self._saltar_blancos()
        return self._leer_mientras(lambda c: not c.isspace())

    def entero(self) -> int:
        """Return the next signed decimal integer."""
        self._saltar_blancos()
        signo = ""
        if self._mirar() in ("+", "-"):
            signo = self._mirar()
            self._avanzar()
        digitos = self._leer_mientras(lambda c: "0" <= c <= "9")
        if not digitos:
            raise ValueError("se esperaba un entero")
        return int(signo + digitos)

    def natural(self) -> int:
        """Return the next non-negative decimal integer."""
        valor = self.entero()
        if valor < 0:
            raise ValueError(f"se esperaba un natural, se leyó {valor}")
        return valor

    def real(self) -> float:
        """Return the next floating point number."""
        self._saltar_blancos()
        texto = self._leer_mientras(lambda c: c in _CARACTERES_REAL)
        try:
            return float(texto)
        except ValueError:
            raise ValueError(f"se esperaba un real, se leyó {texto!r}") from None

    def resto_linea(self) -> str:
        """Return the rest of the current line without consuming the line break."""
        return self._leer_mientras(lambda c: c != "\n")

    def descartar_linea(self) -> str:
        """Consume the rest of the current line, line break included.

        Returns the discarded text without the line break.
        """
        texto = self.resto_linea()
        if self._mirar() == "\n":
            self._avanzar()
        return texto