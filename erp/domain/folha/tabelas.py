"""Tabelas de INSS e IRPF (2024, simplificadas).

Valores sao constantes de politica: mudam com a legislacao. A forma de
aplicacao (faixa unica sobre o valor inteiro, nao progressiva) nao muda.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class FaixaTributaria:
    """Ate `teto` (inclusive): valor * aliquota - deducao."""

    teto: Decimal
    aliquota: Decimal
    deducao: Decimal = Decimal("0")


TABELA_INSS_2024: tuple[FaixaTributaria, ...] = (
    FaixaTributaria(teto=Decimal("1412.00"), aliquota=Decimal("0.075")),
    FaixaTributaria(teto=Decimal("2666.68"), aliquota=Decimal("0.09")),
    FaixaTributaria(teto=Decimal("4000.03"), aliquota=Decimal("0.12")),
    FaixaTributaria(teto=Decimal("7786.02"), aliquota=Decimal("0.14")),
)

# Acima do teto: teto da ultima faixa * aliquota da ultima faixa.
TETO_INSS_2024 = TABELA_INSS_2024[-1].teto * TABELA_INSS_2024[-1].aliquota

# Base ate a primeira faixa e isenta; acima da ultima, FAIXA_IRPF_SUPERIOR.
TABELA_IRPF_2024: tuple[FaixaTributaria, ...] = (
    FaixaTributaria(teto=Decimal("2112.00"), aliquota=Decimal("0"), deducao=Decimal("0")),
    FaixaTributaria(teto=Decimal("2826.65"), aliquota=Decimal("0.075"), deducao=Decimal("158.40")),
    FaixaTributaria(teto=Decimal("3751.05"), aliquota=Decimal("0.15"), deducao=Decimal("370.40")),
    FaixaTributaria(teto=Decimal("4664.68"), aliquota=Decimal("0.225"), deducao=Decimal("651.73")),
)
FAIXA_IRPF_SUPERIOR = FaixaTributaria(
    teto=Decimal("Infinity"),
    aliquota=Decimal("0.275"),
    deducao=Decimal("884.96"),
)

DEDUCAO_DEPENDENTE_IRPF = Decimal("189.59")
