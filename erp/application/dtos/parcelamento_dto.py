from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from erp.domain.parcelamento.value_objects import Parcela, StatusParcela
from erp.application.dtos.limites import VALOR_MAXIMO


class ParcelamentoMensalRequestDTO(BaseModel):
    valor_total: Decimal = Field(ge=0, le=VALOR_MAXIMO)
    desconto: Decimal = Field(default=Decimal("0"), ge=0, le=VALOR_MAXIMO)
    acrescimo: Decimal = Field(default=Decimal("0"), ge=0, le=VALOR_MAXIMO)
    numero_parcelas: int = Field(ge=1, le=600)
    data_inicio: date


class ParcelaPersonalizadaDTO(BaseModel):
    valor: Decimal = Field(ge=0, le=VALOR_MAXIMO)
    vencimento: date


class ParcelasPersonalizadasRequestDTO(BaseModel):
    valor_total: Decimal = Field(ge=0, le=VALOR_MAXIMO)
    desconto: Decimal = Field(default=Decimal("0"), ge=0, le=VALOR_MAXIMO)
    acrescimo: Decimal = Field(default=Decimal("0"), ge=0, le=VALOR_MAXIMO)
    parcelas: list[ParcelaPersonalizadaDTO]


class ParcelaEntradaDTO(BaseModel):
    numero: int = Field(ge=1)
    valor: Decimal = Field(ge=0, le=VALOR_MAXIMO)
    vencimento: date
    status: StatusParcela = StatusParcela.PENDENTE


class SituacaoRequestDTO(BaseModel):
    referencia: date
    parcelas: list[ParcelaEntradaDTO]


class ParcelaDTO(BaseModel):
    numero: int
    valor: str
    vencimento: str
    status: str
    dias_atraso: int = 0

    @classmethod
    def from_domain(cls, parcela: Parcela, dias_atraso: int = 0) -> ParcelaDTO:
        return cls(
            numero=parcela.numero,
            valor=f"{parcela.valor:.2f}",
            vencimento=parcela.vencimento.isoformat(),
            status=parcela.status.value,
            dias_atraso=dias_atraso,
        )


class ParcelamentoDTO(BaseModel):
    valor_final: str
    parcelas: list[ParcelaDTO]


class SituacaoDTO(BaseModel):
    parcelas: list[ParcelaDTO]
    qtd_atrasadas: int
    valor_em_atraso: str
