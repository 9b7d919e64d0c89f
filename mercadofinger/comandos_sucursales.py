"""Interpreter commands for the collection of branch client groups."""

from __future__ import annotations

import random
from typing import Dict, Optional, TypeVar

from mercadofinger.clientes_abb import ClientesABB
from mercadofinger.clientes_sucursales import ClientesSucursales
from mercadofinger.comandos_base import Comando, Estado
from mercadofinger.lector import Lector

_T = TypeVar("_T")


def _presente(valor: Optional[_T], nombre: str) -> _T:
    if valor is None:
        raise RuntimeError(f"no hay {nombre} creada")
    return valor


def _sucursales(estado: Estado) -> ClientesSucursales:
    return _presente(estado.sucursales, "coleccion de grupos")


def _hay_clientes(grupo: Optional[ClientesABB]) -> bool:
    return grupo is not None and len(grupo) > 0


def _crear(estado: Estado, lector: Lector) -> str:
    if estado.sucursales is not None:
        raise RuntimeError("ya hay coleccion de grupos creada")
    estado.sucursales = ClientesSucursales()
    return "La coleccion de grupos ha sido creado de forma exitosa.\n"


def _agregar(estado: Estado, lector: Lector) -> str:
    sucursales = _sucursales(estado)
    if not _hay_clientes(estado.grupo):
        raise RuntimeError("no hay grupo con clientes para agregar")
    sucursales.insertar(estado.grupo, random.randrange(1000))
    estado.grupo = None
    return "Se ha agregado el grupo a la coleccion de forma exitosa.\n"


def _imprimir(estado: Estado, lector: Lector) -> str:
    return _sucursales(estado).formatear()


def _imprimir_invertida(estado: Estado, lector: Lector) -> str:
    return _sucursales(estado).formatear_invertido()


def _nesimo(estado: Estado, lector: Lector) -> str:
    n = lector.entero()
    grupo = _sucursales(estado).nesimo(n)
    if _hay_clientes(grupo):
        return f"Grupo en la posicion {n}:\n" + grupo.formatear()
    return f"NO existe un grupo en la posicion {n}\n"


def _cantidad(estado: Estado, lector: Lector) -> str:
    return f"La cantidad de grupos en la coleccion es {len(_sucursales(estado))}\n"


def _primero(estado: Estado, lector: Lector) -> str:
    sucursales = _sucursales(estado)
    if len(sucursales) > 0:
        return "Primer grupo:\n" + sucursales.primero().formatear()
    return "No se puede obtener el primero de la coleccion de grupos porque es vacia\n"


def _remover_ultimo(estado: Estado, lector: Lector) -> str:
    sucursales = _sucursales(estado)
    if len(sucursales) > 0:
        return "Ultimo grupo (removido):\n" + sucursales.remover_ultimo().formatear()
    return "No se puede remover el ultimo de la coleccion de grupos porque es vacia\n"


def _remover_nesimo(estado: Estado, lector: Lector) -> str:
    n = lector.natural()
    sucursales = _sucursales(estado)
    cantidad = len(sucursales)
    if cantidad >= n:
        grupo = sucursales.remover_nesimo(n)
        return f"Grupo en la posicion {n} (removido):\n" + grupo.formatear()
    return (
        f"No se puede remover el elemento {n} de la coleccion de grupos "
        f"porque solo contiene {cantidad}\n"
    )


def _liberar(estado: Estado, lector: Lector) -> str:
    _sucursales(estado)
    estado.sucursales = None
    return "Coleccion de grupos liberada\n"


def _cliente_mas_repetido(estado: Estado, lector: Lector) -> str:
    cliente = _sucursales(estado).cliente_mas_repetido()
    if cliente is None:
        return (
            "No hay cliente repetido porque no hay clientes en los grupos de la "
            "coleccion.\n"
        )
    return "El cliente que aparece en la mayor cantidad de grupos es:\n" + cliente.formatear()


def comandos_sucursales() -> Dict[str, Comando]:
    """Return the branch-collection commands keyed by command name."""
    return {
        "crearClientesSucursalesLDE": _crear,
        "agregarAClientesSucursalesLDE": _agregar,
        "imprimirClientesSucursalesLDE": _imprimir,
        "imprimirInvertidaClientesSucursalesLDE": _imprimir_invertida,
        "obtenerNesimoClientesSucursalesLDE": _nesimo,
        "cantidadClientesSucursalesLDE": _cantidad,
        "obtenerPrimeroClientesSucursalesLDE": _primero,
        "removerUltimoClientesSucursalesLDE": _remover_ultimo,
        "removerNesimoClientesSucursalesLDE": _remover_nesimo,
        "liberarClientesSucursalesLDE": _liberar,
        "clienteMasRepetido": _cliente_mas_repetido,
    }