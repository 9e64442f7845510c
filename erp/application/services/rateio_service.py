from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from erp.domain.rateio.services import rateio_igualitario, ratear_validado
from erp.domain.rateio.value_objects import (
    TOLERANCIA_RATEIO,
    TOLERANCIA_RATEIO_COLABORADOR,
    TOLERANCIA_RATEIO_DESPESA,
    CotaRateio,
)
from erp.domain.shared.resultado import Resultado

from ..dtos.rateio_dto import (
    CotaSugeridaDTO,
    LinhaRateioDTO,
    RateioDTO,
    RateioIgualitarioRequestDTO,
    RateioRequestDTO,
    TipoTolerancia,
)

TOLERANCIAS: dict[TipoTolerancia, Decimal] = {
    TipoTolerancia.PADRAO: TOLERANCIA_RATEIO,
    TipoTolerancia.DESPESA: TOLERANCIA_RATEIO_DESPESA,
    TipoTolerancia.COLABORADOR: TOLERANCIA_RATEIO_COLABORADOR,
}


class RateioService:
    def ratear(self, request: RateioRequestDTO) -> Resultado[RateioDTO]:
        cotas = [CotaRateio(entidade_id=c.entidade_id, percentual=c.percentual) for c in request.cotas]
        resultado = ratear_validado(request.valor_total, cotas, TOLERANCIAS[request.tolerancia])
        if resultado.erro is not None:
            return Resultado.falha(resultado.erro)

        linhas = resultado.desembrulhar()
        return Resultado.sucesso(
            RateioDTO(
                valor_total=str(request.valor_total.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)),
                linhas=[LinhaRateioDTO.from_domain(linha) for linha in linhas],
            )
        )

    def sugerir_igualitario(self, request: RateioIgualitarioRequestDTO) -> list[CotaSugeridaDTO]:
        return [CotaSugeridaDTO.from_domain(c) for c in rateio_igualitario(request.entidade_ids)]
