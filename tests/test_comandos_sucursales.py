import io

import pytest

from mercadofinger.cliente import Cliente
from mercadofinger.clientes_abb import ClientesABB
from mercadofinger.comandos_base import Estado
from mercadofinger.comandos_sucursales import comandos_sucursales
from mercadofinger.lector import Lector

COMANDOS = comandos_sucursales()


def correr(estado, nombre, entrada=""):
    return COMANDOS[nombre](estado, Lector(io.StringIO(entrada)))


def grupo_de(*clientes):
    grupo = ClientesABB()
    for cliente in clientes:
        grupo.insertar(cliente)
    return grupo


def estado_con(*grupos):
    estado = Estado()
    correr(estado, "crearClientesSucursalesLDE")
    for grupo in grupos:
        estado.grupo = grupo
        correr(estado, "agregarAClientesSucursalesLDE")
    return estado


def test_crear_coleccion():
    estado = Estado()
    salida = correr(estado, "crearClientesSucursalesLDE")
    assert salida == "La coleccion de grupos ha sido creado de forma exitosa.\n"
    assert len(estado.sucursales) == 0
    with pytest.raises(RuntimeError):
        correr(estado, "crearClientesSucursalesLDE")


def test_agregar_grupo_lo_traslada():
    grupo = grupo_de(Cliente(1, "A", "A", 20))
    estado = estado_con()
    estado.grupo = grupo
    salida = correr(estado, "agregarAClientesSucursalesLDE")
    assert salida == "Se ha agregado el grupo a la coleccion de forma exitosa.\n"
    assert estado.grupo is None
    assert list(estado.sucursales) == [grupo]


def test_agregar_grupo_vacio_falla():
    estado = estado_con()
    estado.grupo = ClientesABB()
    with pytest.raises(RuntimeError):
        correr(estado, "agregarAClientesSucursalesLDE")
    estado.grupo = None
    with pytest.raises(RuntimeError):
        correr(estado, "agregarAClientesSucursalesLDE")


def test_agregar_sin_coleccion_falla():
    estado = Estado(grupo=grupo_de(Cliente(1, "A", "A", 20)))
    with pytest.raises(RuntimeError):
        correr(estado, "agregarAClientesSucursalesLDE")


def test_imprimir_en_ambos_sentidos():
    joven = grupo_de(Cliente(1, "A", "A", 20))
    mayor = grupo_de(Cliente(2, "B", "B", 60))
    estado = estado_con(mayor, joven)
    directa = correr(estado, "imprimirClientesSucursalesLDE")
    invertida = correr(estado, "imprimirInvertidaClientesSucursalesLDE")
    assert directa == estado.sucursales.formatear()
    assert invertida == estado.sucursales.formatear_invertido()
    assert directa.startswith("clientesSucursalesLDE de grupos:\n")
    assert directa.index("Id: 1") < directa.index("Id: 2")
    assert invertida.index("Id: 2") < invertida.index("Id: 1")


def test_nesimo_grupo():
    joven = grupo_de(Cliente(1, "A", "A", 20))
    mayor = grupo_de(Cliente(2, "B", "B", 60))
    estado = estado_con(mayor, joven)
    assert correr(estado, "obtenerNesimoClientesSucursalesLDE", "2") == (
        "Grupo en la posicion 2:\n" + mayor.formatear()
    )
    assert correr(estado, "obtenerNesimoClientesSucursalesLDE", "5") == (
        "NO existe un grupo en la posicion 5\n"
    )


def test_cantidad_de_grupos():
    estado = estado_con(grupo_de(Cliente(1, "A", "A", 20)), grupo_de(Cliente(2, "B", "B", 60)))
    assert correr(estado, "cantidadClientesSucursalesLDE") == (
        "La cantidad de grupos en la coleccion es 2\n"
    )


def test_primero_y_ultimo():
    joven = grupo_de(Cliente(1, "A", "A", 20))
    mayor = grupo_de(Cliente(2, "B", "B", 60))
    estado = estado_con(mayor, joven)
    assert correr(estado, "obtenerPrimeroClientesSucursalesLDE") == (
        "Primer grupo:\n" + joven.formatear()
    )
    assert correr(estado, "removerUltimoClientesSucursalesLDE") == (
        "Ultimo grupo (removido):\n" + mayor.formatear()
    )
    assert list(estado.sucursales) == [joven]


def test_primero_y_ultimo_en_coleccion_vacia():
    estado = estado_con()
    assert correr(estado, "obtenerPrimeroClientesSucursalesLDE") == (
        "No se puede obtener el primero de la coleccion de grupos porque es vacia\n"
    )
    assert correr(estado, "removerUltimoClientesSucursalesLDE") == (
        "No se puede remover el ultimo de la coleccion de grupos porque es vacia\n"
    )


def test_remover_nesimo():
    joven = grupo_de(Cliente(1, "A", "A", 20))
    mayor = grupo_de(Cliente(2, "B", "B", 60))
    estado = estado_con(mayor, joven)
    assert correr(estado, "removerNesimoClientesSucursalesLDE", "1") == (
        "Grupo en la posicion 1 (removido):\n" + joven.formatear()
    )
    assert list(estado.sucursales) == [mayor]
    assert correr(estado, "removerNesimoClientesSucursalesLDE", "3") == (
        "No se puede remover el elemento 3 de la coleccion de grupos porque solo contiene 1\n"
    )


def test_liberar_coleccion():
    estado = estado_con()
    assert correr(estado, "liberarClientesSucursalesLDE") == "Coleccion de grupos liberada\n"
    assert estado.sucursales is None
    with pytest.raises(RuntimeError):
        correr(estado, "liberarClientesSucursalesLDE")


def test_cliente_mas_repetido_sin_clientes():
    estado = estado_con()
    assert correr(estado, "clienteMasRepetido") == (
        "No hay cliente repetido porque no hay clientes en los grupos de la coleccion.\n"
    )


def test_cliente_mas_repetido():
    repetido = Cliente(7, "R", "R", 30)
    estado = estado_con(
        grupo_de(Cliente(1, "A", "A", 20), repetido),
        grupo_de(Cliente(7, "R", "R", 30), Cliente(3, "C", "C", 40)),
    )
    salida = correr(estado, "clienteMasRepetido")
    assert salida == (
        "El cliente que aparece en la mayor cantidad de grupos es:\n" + repetido.formatear()
    )


def test_comandos_sin_coleccion_fallan():
    with pytest.raises(RuntimeError):
        correr(Estado(), "cantidadClientesSucursalesLDE")