from mercadofinger.fecha import Fecha
from mercadofinger.producto import Producto
from mercadofinger.promocion import Promocion


def _producto(id_producto):
    return Producto(id_producto, "Producto Dummy", 100, Fecha(1, 1, 1))


def _promocion(id_promo, ini, fin, ids=(), cant_max=10):
    promocion = Promocion(id_promo, Fecha(*ini), Fecha(*fin), cant_max)
    for id_producto in ids:
        promocion.agregar(_producto(id_producto))
    return promocion


def test_agregar_y_pertenece():
    promocion = _promocion(1, (1, 1, 2024), (10, 1, 2024))
    assert promocion.pertenece(_producto(3)) is False
    promocion.agregar(_producto(3))
    assert promocion.pertenece(_producto(3)) is True
    assert promocion.pertenece(_producto(4)) is False


def test_agregar_fuera_de_rango_se_ignora():
    promocion = _promocion(1, (1, 1, 2024), (10, 1, 2024), cant_max=5)
    promocion.agregar(_producto(5))
    promocion.agregar(_producto(12))
    assert promocion.pertenece(_producto(5)) is False
    assert promocion.productos.es_vacio() is True


def test_fechas_e_id():
    promocion = _promocion(8, (2, 3, 2024), (9, 3, 2024))
    assert promocion.id == 8
    assert promocion.fecha_inicio == Fecha(2, 3, 2024)
    assert promocion.fecha_fin == Fecha(9, 3, 2024)


def test_formatear():
    promocion = _promocion(3, (1, 2, 2024), (5, 2, 2024), ids=(4, 1))
    assert promocion.formatear() == "Promocion #3 del 1/2/2024 al 5/2/2024\nProductos: 1 4 \n"


def test_sin_productos_comunes_son_compatibles():
    a = _promocion(1, (1, 1, 2024), (10, 1, 2024), ids=(1, 2))
    b = _promocion(2, (5, 1, 2024), (15, 1, 2024), ids=(3,))
    assert a.compatible_con(b) is True
    assert b.compatible_con(a) is True


def test_productos_comunes_fechas_solapadas():
    a = _promocion(1, (1, 1, 2024), (10, 1, 2024), ids=(1, 2))
    b = _promocion(2, (5, 1, 2024), (15, 1, 2024), ids=(2,))
    assert a.compatible_con(b) is False
    assert b.compatible_con(a) is False


def test_productos_comunes_fechas_disjuntas():
    a = _promocion(1, (1, 1, 2024), (10, 1, 2024), ids=(2,))
    b = _promocion(2, (11, 1, 2024), (15, 1, 2024), ids=(2,))
    assert a.compatible_con(b) is True
    assert b.compatible_con(a) is True


def test_fin_igual_a_inicio_no_es_compatible():
    a = _promocion(1, (1, 1, 2024), (10, 1, 2024), ids=(2,))
    b = _promocion(2, (10, 1, 2024), (15, 1, 2024), ids=(2,))
    assert a.compatible_con(b) is False
    assert b.compatible_con(a) is False


def test_mismo_inicio_con_producto_comun():
    a = _promocion(1, (1, 1, 2024), (2, 1, 2024), ids=(0,))
    b = _promocion(2, (1, 1, 2024), (20, 1, 2024), ids=(0,))
    assert a.compatible_con(b) is False