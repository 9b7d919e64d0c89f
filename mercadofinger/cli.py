"""Command interpreter that reads commands from a stream and runs them."""

from __future__ import annotations

import argparse
import sys
from typing import Dict, Optional, Sequence, TextIO, TypeVar

from mercadofinger.comandos_base import Comando, Estado, comandos_base, leer_fecha
from mercadofinger.comandos_clientes import comandos_clientes
from mercadofinger.comandos_promociones import (
    agregar_productos_leidos,
    comandos_promociones,
    leer_promocion,
)
from mercadofinger.comandos_sucursales import comandos_sucursales
from mercadofinger.historial import Historial
from mercadofinger.lector import Lector
from mercadofinger.lista_promociones import ListaPromociones
from mercadofinger.promocion import Promocion

_T = TypeVar("_T")

BIENVENIDA = "Bienvenido al programa principal de MercadoFinger. Por favor ingrese su comando:\n"


def _presente(valor: Optional[_T], nombre: str) -> _T:
    if valor is None:
        raise RuntimeError(f"no hay {nombre} creado")
    return valor


def _lista(estado: Estado) -> ListaPromociones:
    """Return the current list, treating a missing one as empty."""
    if estado.lista is None:
        estado.lista = ListaPromociones()
    return estado.lista


def _promocion(estado: Estado) -> Promocion:
    return _presente(estado.promocion, "promocion")


def _historial(estado: Estado) -> Historial:
    return _presente(estado.historial, "historial")


def _crear_lista(estado: Estado, lector: Lector) -> str:
    if estado.lista is not None and not estado.lista.es_vacia():
        raise RuntimeError("ya hay lista de promociones creada")
    estado.lista = ListaPromociones()
    return "Lista de promociones creada con exito.\n"


def _agregar_a_lista(estado: Estado, lector: Lector) -> str:
    _lista(estado).agregar(_promocion(estado))
    estado.promocion = None
    return "Se ha agregado la promocion a la lista de forma exitosa.\n"


def _es_vacia_lista(estado: Estado, lector: Lector) -> str:
    if _lista(estado).es_vacia():
        return "La lista de promociones es vacia.\n"
    return "La lista de promociones NO es vacia.\n"


def _imprimir_lista(estado: Estado, lector: Lector) -> str:
    return _lista(estado).formatear()


def _liberar_lista(estado: Estado, lector: Lector) -> str:
    estado.lista = None
    return "Lista promociones liberada con exito.\n"


def _no_pertenece(id_promocion: int) -> str:
    return f"La promocion de id {id_promocion} NO pertenece a la lista de promociones.\n"


def _pertenece_a_lista(estado: Estado, lector: Lector) -> str:
    id_promocion = lector.entero()
    if _lista(estado).pertenece(id_promocion):
        return f"La promocion de id {id_promocion} pertenece a la lista de promociones.\n"
    return _no_pertenece(id_promocion)


def _obtener_de_lista(estado: Estado, lector: Lector) -> str:
    id_promocion = lector.entero()
    lista = _lista(estado)
    if lista.pertenece(id_promocion):
        return lista.obtener(id_promocion).formatear()
    return _no_pertenece(id_promocion)


def _finalizadas(estado: Estado, lector: Lector) -> str:
    fecha = leer_fecha(lector)
    extraidas = _lista(estado).extraer_finalizadas(fecha)
    return "Promociones finalizadas: \n" + extraidas.formatear()


def _activas(estado: Estado, lector: Lector) -> str:
    fecha = leer_fecha(lector)
    extraidas = _lista(estado).extraer_activas(fecha)
    return "Promociones activas: \n" + extraidas.formatear()


def _es_compatible_lista(estado: Estado, lector: Lector) -> str:
    if _lista(estado).es_compatible(_promocion(estado)):
        return "La promocion es compatible con el resto de las promociones de la lista.\n"
    return "La promocion NO es compatible con el resto de las promociones de la lista.\n"


def _unir_listas(estado: Estado, lector: Lector) -> str:
    otra = ListaPromociones()
    for _ in range(lector.entero()):
        promocion = leer_promocion(lector)
        agregar_productos_leidos(promocion, lector)
        otra.agregar(promocion)
    return _lista(estado).unir(otra).formatear()


def _crear_historial(estado: Estado, lector: Lector) -> str:
    if estado.historial is not None:
        raise RuntimeError("ya hay historial creado")
    estado.historial = Historial(leer_fecha(lector))
    return "Historial creado con exito.\n"


def _agregar_promocion_historial(estado: Estado, lector: Lector) -> str:
    _historial(estado).agregar_promocion(_promocion(estado))
    estado.promocion = None
    return "La promocion fue agregada al historial con exito.\n"


def _agregar_producto_historial(estado: Estado, lector: Lector) -> str:
    historial = _historial(estado)
    id_promo = lector.entero()
    historial.agregar_producto(_presente(estado.producto, "producto"), id_promo)
    estado.producto = None
    return f"El producto fue agregado a la promocion de id {id_promo}.\n"


def _avanzar_historial(estado: Estado, lector: Lector) -> str:
    historial = _historial(estado)
    fecha = leer_fecha(lector)
    historial.avanzar_a(fecha)
    return f"Se avanzo la fecha de la historial a {fecha}\n"


def _imprimir_finalizadas(estado: Estado, lector: Lector) -> str:
    return "Promociones finalizadas:\n" + _historial(estado).formatear_finalizadas()


def _imprimir_activas(estado: Estado, lector: Lector) -> str:
    return "Promociones activas:\n" + _historial(estado).formatear_activas()


def _imprimir_futuras(estado: Estado, lector: Lector) -> str:
    return "Promociones futuras:\n" + _historial(estado).formatear_futuras()


def _es_compatible_historial(estado: Estado, lector: Lector) -> str:
    if _historial(estado).es_compatible(_promocion(estado)):
        return "La promocion es compatible con las demas promociones de la historial.\n"
    return "La promocion NO es compatible con las demas promociones de la historial.\n"


def _liberar_historial(estado: Estado, lector: Lector) -> str:
    _historial(estado)
    estado.historial = None
    return "Historial liberada con exito.\n"


def comandos_listas() -> Dict[str, Comando]:
    """Return the promotion-list and history commands keyed by command name."""
    return {
        "crearListaPromociones": _crear_lista,
        "agregarAListaPromociones": _agregar_a_lista,
        "esVaciaListaPromociones": _es_vacia_lista,
        "imprimirListaPromociones": _imprimir_lista,
        "liberarListaPromociones": _liberar_lista,
        "pertenecePromocionListaPromociones": _pertenece_a_lista,
        "obtenerPromocionListaPromociones": _obtener_de_lista,
        "obtenerPromocionesFinalizadas": _finalizadas,
        "obtenerPromocionesActivas": _activas,
        "esCompatibleListaPromociones": _es_compatible_lista,
        "unirListaPromociones": _unir_listas,
        "crearHistorial": _crear_historial,
        "agregarPromocionHistorial": _agregar_promocion_historial,
        "agregarProductoAPromocionHistorial": _agregar_producto_historial,
        "avanzarAFechaHistorial": _avanzar_historial,
        "imprimirPromocionesFinalizadosHistorial": _imprimir_finalizadas,
        "imprimirPromocionesActivasHistorial": _imprimir_activas,
        "imprimirPromocionesFuturasHistorial": _imprimir_futuras,
        "esCompatiblePromocionHistorial": _es_compatible_historial,
        "liberarHistorial": _liberar_historial,
    }


def _todos_los_comandos() -> Dict[str, Comando]:
    comandos: Dict[str, Comando] = {}
    for grupo in (
        comandos_base(),
        comandos_clientes(),
        comandos_sucursales(),
        comandos_promociones(),
        comandos_listas(),
    ):
        comandos.update(grupo)
    return comandos


def ejecutar(entrada: TextIO, salida: TextIO) -> None:
    """Run the commands read from ``entrada``, writing prompts and results to ``salida``.

    Stops at the command ``Fin`` or at the end of the input. Errors raised by
    a command propagate to the caller.
    """
    comandos = _todos_los_comandos()
    lector = Lector(entrada)
    estado = Estado()
    salida.write(BIENVENIDA)
    numero = 0
    while True:
        numero += 1
        salida.write(f"{numero}> ")
        try:
            nombre = lector.palabra()
        except EOFError:
            break
        if nombre == "Fin":
            salida.write("Fin.\n")
            break
        if nombre == "#":
            salida.write(f"# {lector.resto_linea()}.\n")
        elif nombre in comandos:
            salida.write(comandos[nombre](estado, lector))
        else:
            salida.write("Comando no reconocido.\n")
        lector.descartar_linea()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interpreter over a file or standard input; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="mercadofinger",
        description="Intérprete de comandos de MercadoFinger.",
    )
    parser.add_argument(
        "archivo",
        nargs="?",
        help="archivo de comandos; si se omite se lee la entrada estándar",
    )
    args = parser.parse_args(argv)
    try:
        if args.archivo is None:
            ejecutar(sys.stdin, sys.stdout)
        else:
            with open(args.archivo, encoding="utf-8") as entrada:
                ejecutar(entrada, sys.stdout)
    except (RuntimeError, KeyError, ValueError, IndexError, EOFError, OSError) as error:
        sys.stdout.flush()
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())