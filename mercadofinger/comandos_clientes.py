"""Interpreter commands for single clients and client search trees."""

from __future__ import annotations

import time
from typing import Dict, Iterator, Optional, TypeVar

from mercadofinger.cliente import Cliente
from mercadofinger.clientes_abb import ClientesABB
from mercadofinger.comandos_base import Comando, Estado
from mercadofinger.lector import Lector

_T = TypeVar("_T")


def _presente(valor: Optional[_T], nombre: str) -> _T:
    if valor is None:
        raise RuntimeError(f"no hay {nombre} creado")
    return valor


def _grupo(estado: Estado) -> ClientesABB:
    """Return the current group, treating a missing one as empty."""
    if estado.grupo is None:
        estado.grupo = ClientesABB()
    return estado.grupo


def _crear_cliente(estado: Estado, lector: Lector) -> str:
    if estado.cliente is not None:
        raise RuntimeError("ya hay cliente creado")
    id_cliente = lector.entero()
    nombre = lector.palabra()
    apellido = lector.palabra()
    edad = lector.entero()
    estado.cliente = Cliente(id_cliente, nombre, apellido, edad)
    return "Cliente creadox de forma exitosa.\n"


def _imprimir_edad(estado: Estado, lector: Lector) -> str:
    return f"La edad del cliente es: {_presente(estado.cliente, 'cliente').edad}\n"


def _imprimir_id(estado: Estado, lector: Lector) -> str:
    return f"La id del cliente es: {_presente(estado.cliente, 'cliente').id}\n"


def _imprimir_nombre_y_apellido(estado: Estado, lector: Lector) -> str:
    cliente = _presente(estado.cliente, "cliente")
    return (
        f"El nombre del cliente es: {cliente.nombre}\n"
        f"El apellido del cliente es: {cliente.apellido}\n"
    )


def _imprimir_cliente(estado: Estado, lector: Lector) -> str:
    return _presente(estado.cliente, "cliente").formatear()


def _copiar_cliente(estado: Estado, lector: Lector) -> str:
    copia = _presente(estado.cliente, "cliente").copiar()
    return "Cliente copiado. Datos de la copia:\n" + copia.formatear()


def _liberar_cliente(estado: Estado, lector: Lector) -> str:
    _presente(estado.cliente, "cliente")
    estado.cliente = None
    return "Cliente liberado con exito.\n"


def _crear_grupo(estado: Estado, lector: Lector) -> str:
    if estado.grupo is not None and len(estado.grupo) > 0:
        raise RuntimeError("ya hay grupo creado")
    estado.grupo = ClientesABB()
    return "El grupoABB ha sido creado de forma exitosa.\n"


def _agregar_a_grupo(estado: Estado, lector: Lector) -> str:
    cliente = _presente(estado.cliente, "cliente")
    _grupo(estado).insertar(cliente)
    estado.cliente = None
    return "Se ha agregado el cliente al grupo de forma exitosa.\n"


def _imprimir_grupo(estado: Estado, lector: Lector) -> str:
    return _grupo(estado).formatear()


def _liberar_grupo(estado: Estado, lector: Lector) -> str:
    estado.grupo = None
    return "Grupo liberado con exito.\n"


def _existe_en_grupo(estado: Estado, lector: Lector) -> str:
    id_cliente = lector.entero()
    if _grupo(estado).existe(id_cliente):
        return f"El cliente con id {id_cliente} pertenece al grupo.\n"
    return f"El cliente con id {id_cliente} NO pertenece al grupo.\n"


def _obtener_de_grupo(estado: Estado, lector: Lector) -> str:
    id_cliente = lector.entero()
    grupo = _grupo(estado)
    if not grupo.existe(id_cliente):
        return (
            f"El cliente con id {id_cliente} no se puede imprimir pues NO pertenece al "
            "grupo.\n"
        )
    return grupo.obtener(id_cliente).formatear()


def _altura_grupo(estado: Estado, lector: Lector) -> str:
    return f"La altura del grupo es {_grupo(estado).altura()}.\n"


def _max_id_grupo(estado: Estado, lector: Lector) -> str:
    return f"El mayor id en el grupo es {_grupo(estado).max_id().id}.\n"


def _cantidad_grupo(estado: Estado, lector: Lector) -> str:
    return f"La cantidad de clientes en el grupo es {len(_grupo(estado))}.\n"


def _edad_promedio_grupo(estado: Estado, lector: Lector) -> str:
    return f"La edad promedio del grupo es {_grupo(estado).edad_promedio():.2f}.\n"


def _remover_de_grupo(estado: Estado, lector: Lector) -> str:
    id_cliente = lector.entero()
    grupo = _grupo(estado)
    if grupo.existe(id_cliente):
        grupo.remover(id_cliente)
        return f"El cliente con id {id_cliente} se removio del grupo.\n"
    return (
        f"El cliente con id {id_cliente} no se puede remover porque NO pertenece al "
        "grupo.\n"
    )


def _nesimo_de_grupo(estado: Estado, lector: Lector) -> str:
    n = lector.entero()
    grupo = _grupo(estado)
    cantidad = len(grupo)
    if cantidad >= n:
        return f"Cliente nro {n} del grupoABB:\n" + grupo.nesimo(n).formatear()
    return (
        f"No se puede imprimir vistante {n} del grupoABB porque tiene solo {cantidad} "
        "clientes.\n"
    )


def _orden_balanceado(inicio: int, final: int) -> Iterator[int]:
    """Yield the indexes of a sorted range so that inserting them builds a balanced tree."""
    pendientes = [(inicio, final)]
    while pendientes:
        desde, hasta = pendientes.pop()
        if desde <= hasta:
            medio = (desde + hasta) // 2
            yield medio
            pendientes.append((medio + 1, hasta))
            pendientes.append((desde, medio - 1))


def _grupo_balanceado(tamanio: int, nombre: str, apellido: str, edad: int) -> ClientesABB:
    clientes = [Cliente(i, nombre, apellido, edad) for i in range(tamanio)]
    grupo = ClientesABB()
    for indice in _orden_balanceado(0, tamanio - 1):
        grupo.insertar(clientes[indice])
    return grupo


def _altura_grupo_tiempo(estado: Estado, lector: Lector) -> str:
    tamanio = lector.natural()
    limite = lector.natural()
    grupo = _grupo_balanceado(tamanio, "Alberto", "Pardo", 52)
    inicio = time.process_time()
    altura = grupo.altura()
    tiempo = time.process_time() - inicio
    if tiempo > limite:
        return f"ERROR, tiempo excedido; {tiempo:.1f} > {limite} \n"
    return (
        f"La altura del grupo es {altura}. Calculado correctamente en menos de "
        f"{limite}s.\n"
    )


def _obtener_existe_tiempo(estado: Estado, lector: Lector) -> str:
    tamanio = lector.natural()
    limite = lector.real()
    grupo = _grupo_balanceado(tamanio, "Carlos", "Luna", 45)
    buscados = (0, tamanio - 1, tamanio // 3, (2 * tamanio) // 3)
    inicio = time.process_time()
    existen = [grupo.existe(id_cliente) for id_cliente in buscados]
    obtenidos = [grupo.obtener(id_cliente) for id_cliente in buscados]
    tiempo = time.process_time() - inicio
    if tiempo > limite:
        return f"ERROR, tiempo excedido: {tiempo:.3f} > {limite:.3f} \n"
    banderas = " ".join(str(int(existe)) for existe in existen)
    ids = " ".join(str(cliente.id) for cliente in obtenidos)
    return (
        f"Se obtuvieron los clientes? {banderas} con ids respectivos {ids}\n"
        f"Calculado correctamente en menos de {limite:.3f}s.\n"
    )


def comandos_clientes() -> Dict[str, Comando]:
    """Return the client and client-group commands keyed by command name."""
    return {
        "crearCliente": _crear_cliente,
        "imprimirEdadCliente": _imprimir_edad,
        "imprimirIdCliente": _imprimir_id,
        "imprimirNombreYApellidoCliente": _imprimir_nombre_y_apellido,
        "imprimirCliente": _imprimir_cliente,
        "copiarCliente": _copiar_cliente,
        "liberarCliente": _liberar_cliente,
        "crearClientesABB": _crear_grupo,
        "agregarAClientesABB": _agregar_a_grupo,
        "imprimirClientesABB": _imprimir_grupo,
        "existeEnClientesABB": _existe_en_grupo,
        "obtenerClienteClientesABB": _obtener_de_grupo,
        "alturaClientesABB": _altura_grupo,
        "maxIdClientesABB": _max_id_grupo,
        "cantidadClientesClientesABB": _cantidad_grupo,
        "edadPromedioClientesABB": _edad_promedio_grupo,
        "removerDeClientesABB": _remover_de_grupo,
        "liberarClientesABB": _liberar_grupo,
        "obtenerNesimoClienteClientesABB": _nesimo_de_grupo,
        "alturaClientesABBTiempo": _altura_grupo_tiempo,
        "obtenerExisteClienteClientesABBTiempo": _obtener_existe_tiempo,
    }