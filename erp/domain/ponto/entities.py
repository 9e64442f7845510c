from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from .services import calcular_horas_trabalhadas, para_minutos


@dataclass(frozen=True)
class RegistroPonto:
    """Batidas de um dia. Horarios 'HH:MM' validados na construcao."""

    data: date
    entrada_manha: str | None = None
    saida_almoco: str | None = None
    entrada_tarde: str | None = None
    saida_noite: str | None = None

    def __post_init__(self) -> None:
        for batida in (self.entrada_manha, self.saida_almoco, self.entrada_tarde, self.saida_noite):
            if batida:
                para_minutos(batida)

    @property
    def horas_trabalhadas(self) -> Decimal:
        return calcular_horas_trabalhadas(
            self.entrada_manha,
            self.saida_almoco,
            self.entrada_tarde,
            self.saida_noite,
        )
