# tests/domain/test_folha.py
from decimal import Decimal

import pytest

from erp.domain.folha.entities import Adicionais, Descontos
from erp.domain.folha.services import calcular_inss, calcular_irpf, calcular_salario_liquido
from erp.domain.folha.tabelas import TETO_INSS_2024


def test_inss_primeira_faixa():
    assert calcular_inss(Decimal("1412.00")) == Decimal("105.9")


def test_inss_faixa_unica_sobre_salario_inteiro():
    """Aliquota da faixa aplicada ao salario todo, nao progressiva."""
    assert calcular_inss(Decimal("2000")) == Decimal("180")
    assert calcular_inss(Decimal("3000")) == Decimal("360")
    assert calcular_inss(Decimal("5000")) == Decimal("700")


def test_inss_borda_de_faixa_inclusiva():
    assert calcular_inss(Decimal("2666.68")) == Decimal("2666.68") * Decimal("0.09")


def test_inss_acima_do_teto():
    assert calcular_inss(Decimal("10000")) == Decimal("1090.0428")
    assert calcular_inss(Decimal("50000")) == TETO_INSS_2024


def test_inss_zero():
    assert calcular_inss(Decimal("0")) == Decimal("0")


def test_inss_negativo_levanta():
    with pytest.raises(ValueError, match="negativo"):
        calcular_inss(Decimal("-1"))


def test_irpf_isento():
    """2000 - 180 de INSS = 1820, abaixo de 2112."""
    assert calcular_irpf(Decimal("2000")) == Decimal("0")


def test_irpf_segunda_faixa():
    """Base 3000 - 360 = 2640 -> 2640 * 7,5% - 158,40."""
    assert calcular_irpf(Decimal("3000")) == Decimal("39.60")


def test_irpf_quarta_faixa():
    """Base 5000 - 700 = 4300 -> 4300 * 22,5% - 651,73."""
    assert calcular_irpf(Decimal("5000")) == Decimal("315.77")


def test_irpf_faixa_superior():
    base = Decimal("10000") - Decimal("1090.0428")
    assert calcular_irpf(Decimal("10000")) == base * Decimal("0.275") - Decimal("884.96")


def test_irpf_dependentes_reduzem_base():
    base = Decimal("4300") - Decimal("189.59") * 2
    assert calcular_irpf(Decimal("5000"), dependentes=2) == base * Decimal("0.225") - Decimal("651.73")
    assert calcular_irpf(Decimal("5000"), dependentes=2) < calcular_irpf(Decimal("5000"))


def test_irpf_dependentes_negativos_levanta():
    with pytest.raises(ValueError, match="dependentes"):
        calcular_irpf(Decimal("5000"), dependentes=-1)


def test_salario_liquido_sem_adicionais():
    resultado = calcular_salario_liquido(Decimal("5000"))
    assert resultado.inss == Decimal("700")
    assert resultado.irpf == Decimal("315.77")
    assert resultado.total_adicionais == Decimal("0")
    assert resultado.salario_liquido == Decimal("3984.23")


def test_salario_liquido_completo():
    resultado = calcular_salario_liquido(
        Decimal("5000"),
        adicionais=Adicionais(vale_transporte=Decimal("200"), bonus=Decimal("300")),
        descontos=Descontos(plano_saude=Decimal("150")),
    )
    assert resultado.total_adicionais == Decimal("500")
    assert resultado.total_descontos == Decimal("1165.77")
    assert resultado.salario_liquido == Decimal("4334.23")


def test_salario_liquido_invariante():
    resultado = calcular_salario_liquido(
        Decimal("3210.55"),
        adicionais=Adicionais(vale_alimentacao=Decimal("600"), outros=Decimal("12.34")),
        descontos=Descontos(adiantamentos=Decimal("500"), outros=Decimal("7")),
        dependentes=1,
    )
    assert resultado.salario_liquido == (
        resultado.salario_base + resultado.total_adicionais - resultado.total_descontos
    )
    assert resultado.total_descontos == Decimal("507") + resultado.inss + resultado.irpf


def test_totais_adicionais_e_descontos():
    assert Adicionais(Decimal("1"), Decimal("2"), Decimal("3"), Decimal("4")).total == Decimal("10")
    assert Descontos(Decimal("1"), Decimal("2"), Decimal("3")).total == Decimal("6")
