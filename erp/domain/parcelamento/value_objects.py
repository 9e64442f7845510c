from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

# Soma das parcelas personalizadas pode divergir do total em ate R$ 0,10.
TOLERANCIA_PARCELAS = Decimal("0.1")


class StatusParcela(str, Enum):
    PENDENTE = "pendente"
    PAGO = "pago"
    ATRASADO = "atrasado"


@dataclass(frozen=True)
class Parcela:
    numero: int
    valor: Decimal
    vencimento: date
    status: StatusParcela = StatusParcela.PENDENTE

    def __post_init__(self) -> None:
        if self.numero < 1:
            raise ValueError("Numero da parcela comeca em 1")


@dataclass(frozen=True)
class ParcelaPersonalizada:
    """Parcela informada manualmente no formulario de contrato."""

    valor: Decimal
    vencimento: date
