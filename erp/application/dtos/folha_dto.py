from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, Field

from erp.domain.folha.entities import Adicionais, Descontos, ResultadoFolha
from erp.application.dtos.limites import VALOR_MAXIMO

_CENTAVO = Decimal("0.01")
_ZERO = Decimal("0")


def _centavos(valor: Decimal) -> str:
    return str(valor.quantize(_CENTAVO, rounding=ROUND_HALF_UP))


class AdicionaisDTO(BaseModel):
    vale_transporte: Decimal = Field(default=_ZERO, ge=0, le=VALOR_MAXIMO)
    vale_alimentacao: Decimal = Field(default=_ZERO, ge=0, le=VALOR_MAXIMO)
    bonus: Decimal = Field(default=_ZERO, ge=0, le=VALOR_MAXIMO)
    outros: Decimal = Field(default=_ZERO, ge=0, le=VALOR_MAXIMO)

    def to_domain(self) -> Adicionais:
        return Adicionais(
            vale_transporte=self.vale_transporte,
            vale_alimentacao=self.vale_alimentacao,
            bonus=self.bonus,
            outros=self.outros,
        )


class DescontosDTO(BaseModel):
    plano_saude: Decimal = Field(default=_ZERO, ge=0, le=VALOR_MAXIMO)
    adiantamentos: Decimal = Field(default=_ZERO, ge=0, le=VALOR_MAXIMO)
    outros: Decimal = Field(default=_ZERO, ge=0, le=VALOR_MAXIMO)

    def to_domain(self) -> Descontos:
        return Descontos(
            plano_saude=self.plano_saude,
            adiantamentos=self.adiantamentos,
            outros=self.outros,
        )


class SalarioRequestDTO(BaseModel):
    salario_base: Decimal = Field(ge=0, le=VALOR_MAXIMO)
    adicionais: AdicionaisDTO = Field(default_factory=AdicionaisDTO)
    descontos: DescontosDTO = Field(default_factory=DescontosDTO)
    dependentes: int = Field(default=0, ge=0)


class ImpostoDTO(BaseModel):
    salario_base: str
    valor: str

    @classmethod
    def from_domain(cls, salario_base: Decimal, valor: Decimal) -> ImpostoDTO:
        return cls(salario_base=_centavos(salario_base), valor=_centavos(valor))


class HoleriteDTO(BaseModel):
    salario_base: str
    total_adicionais: str
    total_descontos: str
    inss: str
    irpf: str
    salario_liquido: str

    @classmethod
    def from_domain(cls, resultado: ResultadoFolha) -> HoleriteDTO:
        return cls(
            salario_base=_centavos(resultado.salario_base),
            total_adicionais=_centavos(resultado.total_adicionais),
            total_descontos=_centavos(resultado.total_descontos),
            inss=_centavos(resultado.inss),
            irpf=_centavos(resultado.irpf),
            salario_liquido=_centavos(resultado.salario_liquido),
        )
