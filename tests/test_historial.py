import pytest

from mercadofinger.fecha import Fecha
from mercadofinger.historial import Historial
from mercadofinger.producto import Producto
from mercadofinger.promocion import Promocion


def _promo(id_, ini, fin, productos=(), cant_max=20):
    promocion = Promocion(id_, Fecha.parse(ini), Fecha.parse(fin), cant_max)
    for id_producto in productos:
        promocion.agregar(Producto(id_producto, "Prod", 10, Fecha(1, 1, 1)))
    return promocion


def _historial():
    historial = Historial(Fecha.parse("15/6/2024"))
    pasada = _promo(1, "1/1/2024", "31/1/2024", [1, 2])
    activa = _promo(2, "1/6/2024", "30/6/2024", [3])
    futura = _promo(3, "1/8/2024", "31/8/2024", [4])
    for promocion in (pasada, activa, futura):
        historial.agregar_promocion(promocion)
    return historial, pasada, activa, futura


def test_agregar_promocion_clasifica_por_fecha():
    historial, pasada, activa, futura = _historial()
    assert list(historial.finalizadas) == [pasada]
    assert list(historial.activas) == [activa]
    assert list(historial.futuras) == [futura]


def test_promocion_que_termina_hoy_esta_activa():
    historial = Historial(Fecha.parse("10/3/2024"))
    promocion = _promo(5, "1/3/2024", "10/3/2024")
    historial.agregar_promocion(promocion)
    assert list(historial.activas) == [promocion]
    assert historial.finalizadas.es_vacia()


def test_formatear_listas():
    historial, pasada, activa, futura = _historial()
    assert historial.formatear_finalizadas() == pasada.formatear()
    assert historial.formatear_activas() == activa.formatear()
    assert historial.formatear_futuras() == futura.formatear()


def test_historial_vacio_no_imprime_nada():
    historial = Historial(Fecha(1, 1, 2024))
    assert historial.formatear_activas() == ""
    assert historial.formatear_futuras() == ""
    assert historial.formatear_finalizadas() == ""


def test_agregar_producto_a_promocion():
    historial, _, _, futura = _historial()
    producto = Producto(9, "Yerba", 200, Fecha(2, 2, 2024))
    historial.agregar_producto(producto, 3)
    assert futura.pertenece(producto)


def test_agregar_producto_a_promocion_inexistente():
    historial, *_ = _historial()
    with pytest.raises(KeyError):
        historial.agregar_producto(Producto(1, "X", 1, Fecha(1, 1, 1)), 99)


def test_avanzar_mueve_futura_a_activa():
    historial, pasada, activa, futura = _historial()
    historial.avanzar_a(Fecha.parse("20/6/2024"))
    assert list(historial.activas) == [activa]
    historial.avanzar_a(Fecha.parse("15/8/2024"))
    assert list(historial.activas) == [futura]
    assert list(historial.finalizadas) == [pasada, activa]
    assert historial.futuras.es_vacia()
    assert historial.fecha == Fecha.parse("15/8/2024")


def test_avanzar_salta_futura_directo_a_finalizada():
    historial, pasada, activa, futura = _historial()
    historial.avanzar_a(Fecha.parse("1/1/2025"))
    assert list(historial.finalizadas) == [pasada, activa, futura]
    assert historial.activas.es_vacia()
    assert historial.futuras.es_vacia()


def test_es_compatible_con_todas_las_listas():
    historial, *_ = _historial()
    assert historial.es_compatible(_promo(10, "1/6/2024", "30/6/2024", [7]))
    assert not historial.es_compatible(_promo(11, "10/6/2024", "12/6/2024", [3]))


def test_es_compatible_falso_con_lista_vacia():
    historial = Historial(Fecha(1, 1, 2024))
    historial.agregar_promocion(_promo(1, "1/1/2024", "5/1/2024", [1]))
    assert not historial.es_compatible(_promo(2, "1/3/2024", "5/3/2024", [2]))