"""Store clients."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

MAX_NOMBRE = 100
MAX_APELLIDO = 100


@dataclass
class Cliente:
    """A client with id, first name, last name and age."""

    id: int
    nombre: str
    apellido: str
    edad: int

    def __post_init__(self) -> None:
        if len(self.nombre) >= MAX_NOMBRE:
            raise ValueError(f"el nombre supera {MAX_NOMBRE - 1} caracteres")
        if len(self.apellido) >= MAX_APELLIDO:
            raise ValueError(f"el apellido supera {MAX_APELLIDO - 1} caracteres")

    def copiar(self) -> Cliente:
        """Return an independent copy of this client."""
        return dataclasses.replace(self)

    def formatear(self) -> str:
        """Return the client's printed form, three lines ending with a newline."""
        return f"Cliente {self.nombre} {self.apellido}\nId: {self.id}\nEdad: {self.edad}\n"