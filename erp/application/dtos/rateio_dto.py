from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from pydantic import BaseModel, Field

from erp.domain.rateio.value_objects import CotaRateio, LinhaRateio
from erp.domain.shared.formatacao import formatar_moeda
from erp.application.dtos.limites import VALOR_MAXIMO

_CENTAVO = Decimal("0.01")


class TipoTolerancia(str, Enum):
    PADRAO = "padrao"
    DESPESA = "despesa"
    COLABORADOR = "colaborador"


class CotaDTO(BaseModel):
    entidade_id: str = Field(min_length=1)
    percentual: Decimal = Field(ge=0, le=100)


class RateioRequestDTO(BaseModel):
    valor_total: Decimal = Field(ge=0, le=VALOR_MAXIMO)
    cotas: list[CotaDTO] = Field(min_length=1)
    tolerancia: TipoTolerancia = TipoTolerancia.PADRAO


class RateioIgualitarioRequestDTO(BaseModel):
    entidade_ids: list[str] = Field(min_length=1)


class LinhaRateioDTO(BaseModel):
    entidade_id: str
    percentual: str
    valor: str
    valor_formatado: str

    @classmethod
    def from_domain(cls, linha: LinhaRateio) -> LinhaRateioDTO:
        return cls(
            entidade_id=linha.entidade_id,
            percentual=str(linha.percentual),
            valor=str(linha.valor.quantize(_CENTAVO, rounding=ROUND_HALF_UP)),
            valor_formatado=formatar_moeda(linha.valor),
        )


class RateioDTO(BaseModel):
    valor_total: str
    linhas: list[LinhaRateioDTO]


class CotaSugeridaDTO(BaseModel):
    entidade_id: str
    percentual: str

    @classmethod
    def from_domain(cls, cota: CotaRateio) -> CotaSugeridaDTO:
        return cls(entidade_id=cota.entidade_id, percentual=str(cota.percentual))
