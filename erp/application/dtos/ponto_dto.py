from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from erp.application.dtos.limites import HORAS_MAXIMAS


class PontoRequestDTO(BaseModel):
    entrada_manha: str | None = None
    saida_almoco: str | None = None
    entrada_tarde: str | None = None
    saida_noite: str | None = None
    horas_contratadas: Decimal | None = Field(default=None, ge=0, le=HORAS_MAXIMAS)
    saldo_anterior: Decimal = Field(default=Decimal("0"), ge=-HORAS_MAXIMAS, le=HORAS_MAXIMAS)


class HorasDTO(BaseModel):
    horas_trabalhadas: str
    horas_extras: str | None
    saldo_banco_horas: str | None
