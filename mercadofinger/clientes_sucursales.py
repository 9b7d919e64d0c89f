"""Branch client groups ordered by mean age."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Iterator

from mercadofinger.cliente import Cliente
from mercadofinger.clientes_abb import ClientesABB

_ENCABEZADO = "clientesSucursalesLDE de grupos:\n"


@dataclass
class _Sucursal:
    grupo: ClientesABB
    id_sucursal: int


class ClientesSucursales:
    """A sequence of client groups kept in ascending order of mean age.

    Iteration yields the groups in that order.
    """

    def __init__(self) -> None:
        self._sucursales: list[_Sucursal] = []

    def __len__(self) -> int:
        return len(self._sucursales)

    def __iter__(self) -> Iterator[ClientesABB]:
        return (s.grupo for s in self._sucursales)

    def insertar(self, grupo: ClientesABB, id_sucursal: int) -> None:
        """Add ``grupo`` after every group whose mean age is not greater."""
        edad = grupo.edad_promedio()
        posicion = next(
            (i for i, s in enumerate(self._sucursales) if edad < s.grupo.edad_promedio()),
            len(self._sucursales),
        )
        self._sucursales.insert(posicion, _Sucursal(grupo, id_sucursal))

    @staticmethod
    def _formatear(grupos: Iterable[ClientesABB]) -> str:
        partes = [_ENCABEZADO]
        for grupo in grupos:
            partes.append(f"Grupo con edad promedio {grupo.edad_promedio():.2f}:\n")
            partes.append(grupo.formatear())
        return "".join(partes)

    def formatear(self) -> str:
        """Return the printed form of the groups from youngest to oldest."""
        return self._formatear(self)

    def formatear_invertido(self) -> str:
        """Return the printed form of the groups from oldest to youngest."""
        return self._formatear(s.grupo for s in reversed(self._sucursales))

    def primero(self) -> ClientesABB:
        """Return the first group; raise ``IndexError`` if there is none."""
        if not self._sucursales:
            raise IndexError("la colección es vacía")
        return self._sucursales[0].grupo

    def nesimo(self, n: int) -> ClientesABB | None:
        """Return the ``n``-th group counting from 1, or None if there are fewer."""
        if n < 1:
            raise ValueError("la posición debe ser positiva")
        if n > len(self._sucursales):
            return None
        return self._sucursales[n - 1].grupo

    def remover_ultimo(self) -> ClientesABB:
        """Remove and return the last group; raise ``IndexError`` if there is none."""
        if not self._sucursales:
            raise IndexError("la colección es vacía")
        return self._sucursales.pop().grupo

    def remover_nesimo(self, n: int) -> ClientesABB:
        """Remove and return the ``n``-th group counting from 1."""
        if not 1 <= n <= len(self._sucursales):
            raise IndexError(f"no hay grupo en la posición {n}")
        return self._sucursales.pop(n - 1).grupo

    def cliente_mas_repetido(self) -> Cliente | None:
        """Return the client found in the most groups, by id.

        Ties go to the smallest id; the client returned is the one in the
        first group holding it. Returns None when there are no clients.
        """
        apariciones: Counter[int] = Counter()
        primeros: dict[int, Cliente] = {}
        for grupo in self:
            for cliente in grupo:
                apariciones[cliente.id] += 1
                primeros.setdefault(cliente.id, cliente)
        if not apariciones:
            return None
        elegido = max(apariciones, key=lambda id_: (apariciones[id_], -id_))
        return primeros[elegido]