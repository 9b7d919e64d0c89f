import pytest

from mercadofinger.fecha import Fecha
from mercadofinger.producto import MAX_NOMBRE_PRODUCTO, Producto


def test_formatear_layout_without_trailing_newline():
    producto = Producto(4, "Producto Dummy", 100, Fecha(1, 1, 1))
    assert producto.formatear() == "Producto: 4\nProducto Dummy\nPrecio: 100\nIngresado el: 1/1/1"


def test_formatear_uses_date_text():
    fecha = Fecha(15, 8, 2023)
    producto = Producto(7, "Yerba", 250, fecha)
    assert producto.formatear().endswith("Ingresado el: " + str(fecha))
    assert producto.formatear().count("\n") == 3


def test_date_is_shared_not_copied():
    fecha = Fecha(28, 2, 2024)
    producto = Producto(1, "Pan", 50, fecha)
    fecha.aumentar(1)
    assert producto.fecha_ingreso == Fecha(29, 2, 2024)


def test_name_too_long_rejected():
    with pytest.raises(ValueError):
        Producto(1, "z" * MAX_NOMBRE_PRODUCTO, 10, Fecha(1, 1, 2000))