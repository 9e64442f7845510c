from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

_ZERO = Decimal("0")


@dataclass(frozen=True)
class Adicionais:
    vale_transporte: Decimal = _ZERO
    vale_alimentacao: Decimal = _ZERO
    bonus: Decimal = _ZERO
    outros: Decimal = _ZERO

    @property
    def total(self) -> Decimal:
        return self.vale_transporte + self.vale_alimentacao + self.bonus + self.outros


@dataclass(frozen=True)
class Descontos:
    """Descontos informados. INSS e IRPF sao calculados, nao informados."""

    plano_saude: Decimal = _ZERO
    adiantamentos: Decimal = _ZERO
    outros: Decimal = _ZERO

    @property
    def total(self) -> Decimal:
        return self.plano_saude + self.adiantamentos + self.outros


@dataclass(frozen=True)
class ResultadoFolha:
    """Holerite calculado. salario_liquido = base + adicionais - descontos."""

    salario_base: Decimal
    total_adicionais: Decimal
    total_descontos: Decimal  # inclui INSS e IRPF
    inss: Decimal
    irpf: Decimal

    @property
    def salario_liquido(self) -> Decimal:
        return self.salario_base + self.total_adicionais - self.total_descontos
