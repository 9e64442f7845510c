# tests/domain/test_ponto.py
from datetime import date
from decimal import Decimal

import pytest

from erp.domain.ponto.entities import RegistroPonto
from erp.domain.ponto.services import (
    calcular_banco_horas,
    calcular_horas_extras,
    calcular_horas_trabalhadas,
    para_minutos,
)


def test_dia_completo_8_horas():
    assert calcular_horas_trabalhadas("08:00", "12:00", "13:00", "17:00") == Decimal("8")


def test_tarde_curta_7_horas():
    assert calcular_horas_trabalhadas("08:00", "12:00", "13:00", "16:00") == Decimal("7")


def test_sem_almoco_conta_periodo_inteiro():
    """Sem nenhuma batida de almoco, 08:00-17:00 conta 9 horas."""
    assert calcular_horas_trabalhadas("08:00", None, None, "17:00") == Decimal("9")


def test_jornada_longa_10_horas():
    assert calcular_horas_trabalhadas("07:00", "12:00", "13:00", "18:00") == Decimal("10")


def test_sem_entrada_manha_zero():
    assert calcular_horas_trabalhadas(None, "12:00", "13:00", "17:00") == Decimal("0")


def test_sem_saida_noite_zero():
    assert calcular_horas_trabalhadas("08:00", "12:00", "13:00", None) == Decimal("0")


def test_string_vazia_conta_como_ausente():
    assert calcular_horas_trabalhadas("", "12:00", "13:00", "17:00") == Decimal("0")


def test_so_saida_almoco_conta_apenas_manha():
    """Turno da tarde sem entrada_tarde nao conta."""
    assert calcular_horas_trabalhadas("08:00", "12:00", None, "17:00") == Decimal("4")


def test_so_entrada_tarde_conta_apenas_tarde():
    assert calcular_horas_trabalhadas("08:00", None, "13:00", "17:00") == Decimal("4")


def test_minutos_fracionados():
    assert calcular_horas_trabalhadas("08:00", "12:30", "13:30", "17:45") == Decimal("8.75")


def test_saida_antes_da_entrada_levanta():
    with pytest.raises(ValueError, match="anterior"):
        calcular_horas_trabalhadas("22:00", None, None, "06:00")


def test_para_minutos():
    assert para_minutos("00:00") == 0
    assert para_minutos("13:45") == 825


@pytest.mark.parametrize("horario", ["24:00", "8:00", "12:60", "abc", "12h30"])
def test_para_minutos_invalido(horario):
    with pytest.raises(ValueError, match="Horario invalido"):
        para_minutos(horario)


def test_banco_horas_positivo():
    assert calcular_banco_horas(Decimal("10"), Decimal("8")) == Decimal("2")


def test_banco_horas_acumula_saldo_anterior():
    assert calcular_banco_horas(Decimal("6"), Decimal("8"), saldo_anterior=Decimal("5")) == Decimal("3")


def test_horas_extras_nunca_negativas():
    assert calcular_horas_extras(Decimal("10"), Decimal("8")) == Decimal("2")
    assert calcular_horas_extras(Decimal("6"), Decimal("8")) == Decimal("0")


def test_registro_ponto_horas_trabalhadas():
    registro = RegistroPonto(
        data=date(2024, 3, 4),
        entrada_manha="08:00",
        saida_almoco="12:00",
        entrada_tarde="13:00",
        saida_noite="17:00",
    )
    assert registro.horas_trabalhadas == Decimal("8")


def test_registro_ponto_rejeita_horario_invalido():
    with pytest.raises(ValueError, match="Horario invalido"):
        RegistroPonto(data=date(2024, 3, 4), entrada_manha="25:00")


def test_registro_ponto_vazio_zero_horas():
    assert RegistroPonto(data=date(2024, 3, 4)).horas_trabalhadas == Decimal("0")
