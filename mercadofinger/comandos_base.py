"""Interpreter state and the date, product and cart commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, TypeVar

from mercadofinger.carrito_productos import CarritoProductos
from mercadofinger.cliente import Cliente
from mercadofinger.clientes_abb import ClientesABB
from mercadofinger.clientes_sucursales import ClientesSucursales
from mercadofinger.conjunto_productos import ConjuntoProductos
from mercadofinger.fecha import Fecha
from mercadofinger.historial import Historial
from mercadofinger.lector import Lector
from mercadofinger.lista_promociones import ListaPromociones
from mercadofinger.producto import Producto
from mercadofinger.promocion import Promocion

_T = TypeVar("_T")


@dataclass
class Estado:
    """The objects the interpreter's commands work on, one slot per kind."""

    fecha: Optional[Fecha] = None
    cliente: Optional[Cliente] = None
    grupo: Optional[ClientesABB] = None
    producto: Optional[Producto] = None
    carrito: Optional[CarritoProductos] = None
    sucursales: Optional[ClientesSucursales] = None
    conjunto: Optional[ConjuntoProductos] = None
    promocion: Optional[Promocion] = None
    lista: Optional[ListaPromociones] = None
    historial: Optional[Historial] = None


Comando = Callable[[Estado, Lector], str]


def _presente(valor: Optional[_T], nombre: str) -> _T:
    if valor is None:
        raise RuntimeError(f"no hay {nombre} creado")
    return valor


def _ausente(valor: object, nombre: str) -> None:
    if valor is not None:
        raise RuntimeError(f"ya hay {nombre} creado")


def leer_fecha(lector: Lector) -> Fecha:
    """Read a date written as ``dd/mm/aaaa`` from ``lector``."""
    return Fecha.parse(lector.palabra())


def _crear_fecha(estado: Estado, lector: Lector) -> str:
    _ausente(estado.fecha, "fecha")
    estado.fecha = leer_fecha(lector)
    return "Fecha creada en forma exitosa.\n"


def _imprimir_fecha(estado: Estado, lector: Lector) -> str:
    return str(_presente(estado.fecha, "fecha"))


def _liberar_fecha(estado: Estado, lector: Lector) -> str:
    _presente(estado.fecha, "fecha")
    estado.fecha = None
    return "Fecha liberada en forma exitosa.\n"


def _aumentar_dias(estado: Estado, lector: Lector) -> str:
    fecha = _presente(estado.fecha, "fecha")
    dias = lector.natural()
    fecha.aumentar(dias)
    return f"La nueva fecha aplazada {dias} dias es: \n{fecha}"


def _comparar_fechas(estado: Estado, lector: Lector) -> str:
    primera = leer_fecha(lector)
    segunda = leer_fecha(lector)
    comparacion = primera.comparar(segunda)
    if comparacion == 0:
        return "Las fechas son iguales. \n"
    if comparacion == 1:
        return "La primera fecha es posterior a la segunda. \n"
    return "La primera fecha es anterior a la segunda. \n"


def _crear_producto(estado: Estado, lector: Lector) -> str:
    _ausente(estado.producto, "producto")
    id_producto = lector.entero()
    nombre = lector.palabra()
    precio = lector.entero()
    fecha = _presente(estado.fecha, "fecha")
    estado.producto = Producto(id_producto, nombre, precio, fecha)
    estado.fecha = None
    return "Producto creado en forma exitosa.\n"


def _imprimir_producto(estado: Estado, lector: Lector) -> str:
    return _presente(estado.producto, "producto").formatear()


def _liberar_producto(estado: Estado, lector: Lector) -> str:
    _presente(estado.producto, "producto")
    estado.producto = None
    return "Producto liberada en forma exitosa.\n"


def _id_producto(estado: Estado, lector: Lector) -> str:
    return f"ID: {_presente(estado.producto, 'producto').id}\n"


def _crear_carrito(estado: Estado, lector: Lector) -> str:
    _ausente(estado.carrito, "carrito")
    estado.carrito = CarritoProductos()
    return "Coleccion de productos creada de forma exitosa.\n"


def _agregar_carrito(estado: Estado, lector: Lector) -> str:
    carrito = _presente(estado.carrito, "carrito")
    carrito.insertar(_presente(estado.producto, "producto"))
    estado.producto = None
    return "Producto agregada de forma exitosa.\n"


def _imprimir_carrito(estado: Estado, lector: Lector) -> str:
    return _presente(estado.carrito, "carrito").formatear()


def _liberar_carrito(estado: Estado, lector: Lector) -> str:
    _presente(estado.carrito, "carrito")
    estado.carrito = None
    return "Coleccion liberada con exito.\n"


def _es_vacio_carrito(estado: Estado, lector: Lector) -> str:
    if _presente(estado.carrito, "carrito").es_vacio():
        return "La coleccion de productos es vacia.\n"
    return "La coleccion de productos NO es vacia.\n"


def _existe_en_carrito(estado: Estado, lector: Lector) -> str:
    carrito = _presente(estado.carrito, "carrito")
    id_producto = lector.entero()
    if carrito.existe(id_producto):
        return f"El producto con id {id_producto} pertenece a la coleccion.\n"
    return f"El producto con id {id_producto} NO pertenece a la coleccion.\n"


def _obtener_de_carrito(estado: Estado, lector: Lector) -> str:
    carrito = _presente(estado.carrito, "carrito")
    return carrito.obtener(lector.entero()).formatear()


def _remover_de_carrito(estado: Estado, lector: Lector) -> str:
    carrito = _presente(estado.carrito, "carrito")
    id_producto = lector.entero()
    if not carrito.existe(id_producto):
        raise KeyError(id_producto)
    carrito.remover(id_producto)
    return f"Producto con id {id_producto} removida con exito.\n"


def comandos_base() -> Dict[str, Comando]:
    """Return the date, product and cart commands keyed by command name."""
    return {
        "crearFecha": _crear_fecha,
        "imprimirFecha": _imprimir_fecha,
        "liberarFecha": _liberar_fecha,
        "aumentarDias": _aumentar_dias,
        "compararFechas": _comparar_fechas,
        "crearProducto": _crear_producto,
        "imprimirProducto": _imprimir_producto,
        "liberarProducto": _liberar_producto,
        "idProducto": _id_producto,
        "crearCarritoProductos": _crear_carrito,
        "agregarCarritoProductos": _agregar_carrito,
        "imprimirCarritoProductos": _imprimir_carrito,
        "liberarCarritoProductos": _liberar_carrito,
        "esVacioCarritoProductos": _es_vacio_carrito,
        "existeProductoCarritoProductos": _existe_en_carrito,
        "obtenerProductoCarritoProductos": _obtener_de_carrito,
        "removerDeCarritoProductos": _remover_de_carrito,
    }