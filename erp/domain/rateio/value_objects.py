from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

_CEM = Decimal("100")

# ADR: tolerancias distintas por ponto de entrada, nunca unificadas.
TOLERANCIA_RATEIO = Decimal("0.01")
TOLERANCIA_RATEIO_DESPESA = Decimal("0.5")
TOLERANCIA_RATEIO_COLABORADOR = Decimal("0.1")


@dataclass(frozen=True)
class CotaRateio:
    """Percentual de uma empresa/centro de custo. Sempre entre 0 e 100."""

    entidade_id: str
    percentual: Decimal

    def __post_init__(self) -> None:
        if not self.entidade_id.strip():
            raise ValueError("Cota de rateio exige entidade_id")
        if self.percentual < Decimal("0") or self.percentual > _CEM:
            raise ValueError(f"Percentual de rateio fora de 0-100: {self.percentual}")


@dataclass(frozen=True)
class LinhaRateio:
    """Valor sem arredondamento; arredondar apenas na exibicao."""

    entidade_id: str
    percentual: Decimal
    valor: Decimal
