"""Interpreter commands for product sets and single promotions."""

from __future__ import annotations

from typing import Dict, Optional, TypeVar

from mercadofinger.comandos_base import Comando, Estado, leer_fecha
from mercadofinger.conjunto_productos import ConjuntoProductos
from mercadofinger.fecha import Fecha
from mercadofinger.lector import Lector
from mercadofinger.producto import Producto
from mercadofinger.promocion import Promocion

_T = TypeVar("_T")

NOMBRE_PRODUCTO = "Producto Dummy"
PRECIO_DUMMY = 100


def _presente(valor: Optional[_T], nombre: str) -> _T:
    if valor is None:
        raise RuntimeError(f"no hay {nombre} creado")
    return valor


def _conjunto(estado: Estado) -> ConjuntoProductos:
    return _presente(estado.conjunto, "conjunto de productos")


def _promocion(estado: Estado) -> Promocion:
    return _presente(estado.promocion, "promocion")


def producto_dummy(id_producto: int) -> Producto:
    """Return a placeholder product with ``id_producto``, used to test membership."""
    return Producto(id_producto, NOMBRE_PRODUCTO, PRECIO_DUMMY, Fecha(1, 1, 1))


def leer_promocion(lector: Lector) -> Promocion:
    """Read start date, end date, maximum product count and id, and build a promotion."""
    inicio = leer_fecha(lector)
    fin = leer_fecha(lector)
    cant_max = lector.entero()
    id_promocion = lector.entero()
    return Promocion(id_promocion, inicio, fin, cant_max)


def agregar_productos_leidos(promocion: Promocion, lector: Lector) -> None:
    """Read a count followed by that many product ids and add them to ``promocion``."""
    for _ in range(lector.entero()):
        promocion.agregar(producto_dummy(lector.entero()))


def _leer_otro_conjunto(conjunto: ConjuntoProductos, lector: Lector) -> ConjuntoProductos:
    cantidad = lector.entero()
    return ConjuntoProductos(conjunto.cant_max, [lector.entero() for _ in range(cantidad)])


def _crear_conjunto(estado: Estado, lector: Lector) -> str:
    if estado.conjunto is not None:
        raise RuntimeError("ya hay conjunto de productos creado")
    estado.conjunto = ConjuntoProductos(lector.entero())
    return "El conjunto productos fue creado en forma correcta.\n"


def _es_vacio_conjunto(estado: Estado, lector: Lector) -> str:
    if _conjunto(estado).es_vacio():
        return "El conjunto de productos es vacio.\n"
    return "La conjunto de productos NO es vacio.\n"


def _insertar_conjunto(estado: Estado, lector: Lector) -> str:
    conjunto = _conjunto(estado)
    id_producto = lector.entero()
    conjunto.insertar(id_producto)
    return (
        f"Se ejecuto 'insertarTConjuntoProductos' con producto de id {id_producto} "
        "exitosamente.\n"
    )


def _borrar_conjunto(estado: Estado, lector: Lector) -> str:
    conjunto = _conjunto(estado)
    id_producto = lector.entero()
    conjunto.borrar(id_producto)
    return (
        f"Se ejecuto 'borrarDeTConjuntoProductos' con producto de id {id_producto} "
        "exitosamente.\n"
    )


def _pertenece_conjunto(estado: Estado, lector: Lector) -> str:
    conjunto = _conjunto(estado)
    id_producto = lector.entero()
    if conjunto.pertenece(id_producto):
        return f"El producto de id {id_producto} pertenece al conjunto.\n"
    return f"El producto de id {id_producto} NO pertenece al conjunto.\n"


def _cardinal_conjunto(estado: Estado, lector: Lector) -> str:
    return f"El cardinal del conjunto es: {len(_conjunto(estado))}.\n"


def _cant_max_conjunto(estado: Estado, lector: Lector) -> str:
    return f"La cantidad maxima del conjunto es: {_conjunto(estado).cant_max}.\n"


def _imprimir_conjunto(estado: Estado, lector: Lector) -> str:
    return "Conjunto de productos:\n" + _conjunto(estado).formatear()


def _liberar_conjunto(estado: Estado, lector: Lector) -> str:
    _conjunto(estado)
    estado.conjunto = None
    return "Conjunto de productos liberado exitosamente.\n"


def _union_conjunto(estado: Estado, lector: Lector) -> str:
    conjunto = _conjunto(estado)
    otro = _leer_otro_conjunto(conjunto, lector)
    return "Conjunto de productos union:\n" + conjunto.union(otro).formatear()


def _interseccion_conjunto(estado: Estado, lector: Lector) -> str:
    conjunto = _conjunto(estado)
    otro = _leer_otro_conjunto(conjunto, lector)
    return "Conjunto de productos interseccion:\n" + conjunto.interseccion(otro).formatear()


def _diferencia_conjunto(estado: Estado, lector: Lector) -> str:
    conjunto = _conjunto(estado)
    otro = _leer_otro_conjunto(conjunto, lector)
    return "Conjunto de productos diferencia:\n" + conjunto.diferencia(otro).formatear()


def _crear_promocion(estado: Estado, lector: Lector) -> str:
    if estado.promocion is not None:
        raise RuntimeError("ya hay promocion creada")
    estado.promocion = leer_promocion(lector)
    return "Promocion creada con exito.\n"


def _agregar_a_promocion(estado: Estado, lector: Lector) -> str:
    agregar_productos_leidos(_promocion(estado), lector)
    return "Productos agregados a la promocion de forma exitosa.\n"


def _pertenece_a_promocion(estado: Estado, lector: Lector) -> str:
    promocion = _promocion(estado)
    producto = producto_dummy(lector.entero())
    if promocion.pertenece(producto):
        return f"El producto de id {producto.id} pertenece a la promocion.\n"
    return f"El producto de id {producto.id} NO pertenece a la promocion.\n"


def _id_promocion(estado: Estado, lector: Lector) -> str:
    return f"El id de la promocion es: {_promocion(estado).id}.\n"


def _imprimir_promocion(estado: Estado, lector: Lector) -> str:
    return _promocion(estado).formatear()


def _fecha_inicio(estado: Estado, lector: Lector) -> str:
    return f"La fecha inicio de la promocion es: {_promocion(estado).fecha_inicio}\n"


def _fecha_fin(estado: Estado, lector: Lector) -> str:
    return f"La fecha fin de la promocion es: {_promocion(estado).fecha_fin}\n"


def _son_compatibles(estado: Estado, lector: Lector) -> str:
    promocion = _promocion(estado)
    otra = leer_promocion(lector)
    agregar_productos_leidos(otra, lector)
    if promocion.compatible_con(otra):
        return "Las promociones son compatibles.\n"
    return "Las promociones NO son compatibles.\n"


def _liberar_promocion(estado: Estado, lector: Lector) -> str:
    _promocion(estado)
    estado.promocion = None
    return "Promocion liberada con exito.\n"


def comandos_promociones() -> Dict[str, Comando]:
    """Return the product-set and promotion commands keyed by command name."""
    return {
        "crearConjuntoProductos": _crear_conjunto,
        "esVacioConjuntoProductos": _es_vacio_conjunto,
        "insertarConjuntoProductos": _insertar_conjunto,
        "borrarDeConjuntoProductos": _borrar_conjunto,
        "perteneceConjuntoProductos": _pertenece_conjunto,
        "cardinalConjuntoProductos": _cardinal_conjunto,
        "cantMaxConjuntoProductos": _cant_max_conjunto,
        "imprimirConjuntoProductos": _imprimir_conjunto,
        "liberarConjuntoProductos": _liberar_conjunto,
        "unionConjuntoProductos": _union_conjunto,
        "interseccionConjuntoProductos": _interseccion_conjunto,
        "diferenciaConjuntoProductos": _diferencia_conjunto,
        "crearPromocion": _crear_promocion,
        "agregarAPromocion": _agregar_a_promocion,
        "perteneceAPromocion": _pertenece_a_promocion,
        "idPromocion": _id_promocion,
        "imprimirPromocion": _imprimir_promocion,
        "fechaInicioPromocion": _fecha_inicio,
        "fechaFinPromocion": _fecha_fin,
        "sonPromocionesCompatibles": _son_compatibles,
        "liberarPromocion": _liberar_promocion,
    }