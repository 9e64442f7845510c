from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from erp.domain.ponto.entities import RegistroPonto
from erp.domain.ponto.services import calcular_banco_horas, calcular_horas_extras

from ..dtos.ponto_dto import HorasDTO, PontoRequestDTO

_CENTESIMO = Decimal("0.01")


def _horas(valor: Decimal) -> str:
    return str(valor.quantize(_CENTESIMO, rounding=ROUND_HALF_UP))


class PontoService:
    def calcular(self, request: PontoRequestDTO, referencia: date) -> HorasDTO:
        registro = RegistroPonto(
            data=referencia,
            entrada_manha=request.entrada_manha,
            saida_almoco=request.saida_almoco,
            entrada_tarde=request.entrada_tarde,
            saida_noite=request.saida_noite,
        )
        trabalhadas = registro.horas_trabalhadas

        if request.horas_contratadas is None:
            return HorasDTO(horas_trabalhadas=_horas(trabalhadas), horas_extras=None, saldo_banco_horas=None)

        return HorasDTO(
            horas_trabalhadas=_horas(trabalhadas),
            horas_extras=_horas(calcular_horas_extras(trabalhadas, request.horas_contratadas)),
            saldo_banco_horas=_horas(
                calcular_banco_horas(trabalhadas, request.horas_contratadas, request.saldo_anterior)
            ),
        )
