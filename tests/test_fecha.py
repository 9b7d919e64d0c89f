import calendar
import datetime

import pytest

from mercadofinger.fecha import Fecha, dias_mes, es_bisiesto


@pytest.mark.parametrize("anio", [1900, 2000, 2023, 2024, 2100, 2400, 1])
def test_es_bisiesto_matches_calendar(anio):
    assert es_bisiesto(anio) == calendar.isleap(anio)


@pytest.mark.parametrize("anio", [1999, 2000, 2024, 2100])
def test_dias_mes_matches_calendar(anio):
    for mes in range(1, 13):
        assert dias_mes(mes, anio) == calendar.monthrange(anio, mes)[1]


@pytest.mark.parametrize("mes", [0, 13])
def test_dias_mes_invalid_month_is_zero(mes):
    assert dias_mes(mes, 2024) == 0


@pytest.mark.parametrize(
    "inicio,dias",
    [((1, 1, 2023), 0), ((28, 2, 2024), 1), ((28, 2, 2023), 1), ((31, 12, 2023), 1), ((15, 6, 2020), 1000)],
)
def test_aumentar_matches_datetime(inicio, dias):
    fecha = Fecha(*inicio)
    fecha.aumentar(dias)
    esperado = datetime.date(inicio[2], inicio[1], inicio[0]) + datetime.timedelta(days=dias)
    assert (fecha.dia, fecha.mes, fecha.anio) == (esperado.day, esperado.month, esperado.year)


def test_aumentar_negative_raises():
    with pytest.raises(ValueError):
        Fecha(1, 1, 2020).aumentar(-1)


def test_comparar_signs():
    antes = Fecha(31, 12, 2022)
    despues = Fecha(1, 1, 2023)
    assert antes.comparar(despues) == -1
    assert despues.comparar(antes) == 1
    assert antes.comparar(Fecha(31, 12, 2022)) == 0


def test_ordering_operators():
    fechas = [Fecha(5, 3, 2021), Fecha(1, 1, 2020), Fecha(2, 3, 2021)]
    assert sorted(fechas) == [Fecha(1, 1, 2020), Fecha(2, 3, 2021), Fecha(5, 3, 2021)]
    assert Fecha(1, 2, 2020) <= Fecha(1, 2, 2020)
    assert Fecha(2, 2, 2020) > Fecha(1, 2, 2020)


def test_str_has_no_padding():
    assert str(Fecha(1, 2, 2020)) == "1/2/2020"


def test_parse_roundtrip():
    fecha = Fecha.parse("09/11/2023")
    assert fecha == Fecha(9, 11, 2023)
    assert Fecha.parse(str(fecha)) == fecha


@pytest.mark.parametrize("texto", ["1/2", "a/b/c", "1/-2/2020", "1/2/2020/3", ""])
def test_parse_rejects_bad_text(texto):
    with pytest.raises(ValueError):
        Fecha.parse(texto)