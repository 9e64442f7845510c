from __future__ import annotations

from decimal import Decimal

from erp.domain.parcelamento.services import (
    atualizar_status,
    calcular_dias_atraso,
    calcular_valor_final,
    conferir_parcelas_personalizadas,
    gerar_parcelas_mensais,
)
from erp.domain.parcelamento.value_objects import Parcela, ParcelaPersonalizada, StatusParcela
from erp.domain.shared.resultado import Resultado

from ..dtos.parcelamento_dto import (
    ParcelaDTO,
    ParcelamentoDTO,
    ParcelamentoMensalRequestDTO,
    ParcelasPersonalizadasRequestDTO,
    SituacaoDTO,
    SituacaoRequestDTO,
)


class ParcelamentoService:
    def gerar_mensais(self, request: ParcelamentoMensalRequestDTO) -> ParcelamentoDTO:
        valor_final = calcular_valor_final(request.valor_total, request.desconto, request.acrescimo)
        parcelas = gerar_parcelas_mensais(valor_final, request.numero_parcelas, request.data_inicio)
        return ParcelamentoDTO(
            valor_final=f"{valor_final:.2f}",
            parcelas=[ParcelaDTO.from_domain(p) for p in parcelas],
        )

    def conferir_personalizadas(self, request: ParcelasPersonalizadasRequestDTO) -> Resultado[ParcelamentoDTO]:
        valor_final = calcular_valor_final(request.valor_total, request.desconto, request.acrescimo)
        informadas = [ParcelaPersonalizada(valor=p.valor, vencimento=p.vencimento) for p in request.parcelas]

        resultado = conferir_parcelas_personalizadas(valor_final, informadas)
        if resultado.erro is not None:
            return Resultado.falha(resultado.erro)

        return Resultado.sucesso(
            ParcelamentoDTO(
                valor_final=f"{valor_final:.2f}",
                parcelas=[ParcelaDTO.from_domain(p) for p in resultado.desembrulhar()],
            )
        )

    def situacao(self, request: SituacaoRequestDTO) -> SituacaoDTO:
        parcelas = atualizar_status(
            [Parcela(numero=p.numero, valor=p.valor, vencimento=p.vencimento, status=p.status) for p in request.parcelas],
            request.referencia,
        )
        atrasadas = [p for p in parcelas if p.status is StatusParcela.ATRASADO]
        return SituacaoDTO(
            parcelas=[
                ParcelaDTO.from_domain(
                    p,
                    dias_atraso=calcular_dias_atraso(p.vencimento, request.referencia)
                    if p.status is StatusParcela.ATRASADO
                    else 0,
                )
                for p in parcelas
            ],
            qtd_atrasadas=len(atrasadas),
            valor_em_atraso=f"{sum((p.valor for p in atrasadas), Decimal('0')):.2f}",
        )
