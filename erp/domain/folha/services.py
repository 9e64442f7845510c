"""Calculo de INSS, IRPF e salario liquido. Funcoes puras, zero IO.

ADR: faixa unica, nao progressiva. O salario inteiro e tributado pela
aliquota da faixa em que cai. Diverge da legislacao vigente, mas e o valor
que o sistema sempre calculou; "corrigir" mudaria holerites ja emitidos.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from .entities import Adicionais, Descontos, ResultadoFolha
from .tabelas import (
    DEDUCAO_DEPENDENTE_IRPF,
    FAIXA_IRPF_SUPERIOR,
    TABELA_INSS_2024,
    TABELA_IRPF_2024,
    TETO_INSS_2024,
    FaixaTributaria,
)

_ZERO = Decimal("0")


def _faixa_para(valor: Decimal, tabela: Sequence[FaixaTributaria]) -> FaixaTributaria | None:
    for faixa in tabela:
        if valor <= faixa.teto:
            return faixa
    return None


def calcular_inss(salario_base: Decimal) -> Decimal:
    if salario_base < _ZERO:
        raise ValueError("Salario base nao pode ser negativo")

    faixa = _faixa_para(salario_base, TABELA_INSS_2024)
    if faixa is None:
        return TETO_INSS_2024
    return salario_base * faixa.aliquota


def calcular_irpf(salario_base: Decimal, dependentes: int = 0) -> Decimal:
    """Base = salario - INSS - 189,59 por dependente; faixa unica com deducao."""
    if dependentes < 0:
        raise ValueError("Numero de dependentes nao pode ser negativo")

    base = salario_base - calcular_inss(salario_base) - DEDUCAO_DEPENDENTE_IRPF * dependentes

    faixa = _faixa_para(base, TABELA_IRPF_2024) or FAIXA_IRPF_SUPERIOR
    if faixa.aliquota == _ZERO:
        return _ZERO
    return base * faixa.aliquota - faixa.deducao


def calcular_salario_liquido(
    salario_base: Decimal,
    adicionais: Adicionais | None = None,
    descontos: Descontos | None = None,
    dependentes: int = 0,
) -> ResultadoFolha:
    adicionais = adicionais or Adicionais()
    descontos = descontos or Descontos()

    inss = calcular_inss(salario_base)
    irpf = calcular_irpf(salario_base, dependentes)

    return ResultadoFolha(
        salario_base=salario_base,
        total_adicionais=adicionais.total,
        total_descontos=descontos.total + inss + irpf,
        inss=inss,
        irpf=irpf,
    )
