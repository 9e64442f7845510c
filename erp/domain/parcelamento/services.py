"""Geracao e conferencia de parcelas de contratos. Funcoes puras, zero IO.

Invariante: soma das parcelas geradas == valor total, ao centavo. O resto
da divisao vai inteiro para a ultima parcela.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from datetime import date
from decimal import ROUND_FLOOR, Decimal, InvalidOperation

from dateutil.relativedelta import relativedelta

from erp.domain.shared.resultado import ErroValidacao, Resultado, ValidacaoError

from .value_objects import TOLERANCIA_PARCELAS, Parcela, ParcelaPersonalizada, StatusParcela

_ZERO = Decimal("0")
_CENTAVO = Decimal("0.01")


class ParcelasInvalidas(ValidacaoError):
    """Parcelas personalizadas nao fecham com o valor do contrato."""


def calcular_valor_final(
    valor_total: Decimal,
    desconto: Decimal = _ZERO,
    acrescimo: Decimal = _ZERO,
) -> Decimal:
    """Valor final do contrato: total - desconto + acrescimo."""
    if valor_total < _ZERO or desconto < _ZERO or acrescimo < _ZERO:
        raise ValueError("Valores do contrato nao podem ser negativos")
    return valor_total - desconto + acrescimo


def gerar_parcelas_mensais(
    valor_total: Decimal,
    numero_parcelas: int,
    data_inicio: date,
) -> tuple[Parcela, ...]:
    """N parcelas mensais a partir de data_inicio (mes calendario, nao 30 dias).

    Dia 31 + 1 mes cai no ultimo dia do mes seguinte.
    """
    if numero_parcelas < 1:
        raise ValueError("Numero de parcelas deve ser >= 1")
    if valor_total < _ZERO:
        raise ValueError("Valor total nao pode ser negativo")

    try:
        base = (valor_total / numero_parcelas).quantize(_CENTAVO, rounding=ROUND_FLOOR)
    except InvalidOperation as err:
        raise ValueError("Valor total fora do intervalo suportado") from err
    resto = valor_total - base * numero_parcelas

    parcelas = []
    for i in range(numero_parcelas):
        valor = base + resto if i == numero_parcelas - 1 else base
        parcelas.append(
            Parcela(
                numero=i + 1,
                valor=valor,
                vencimento=data_inicio + relativedelta(months=i),
            )
        )
    return tuple(parcelas)


def _soma(parcelas: Sequence[ParcelaPersonalizada]) -> Decimal:
    return sum((p.valor for p in parcelas), _ZERO)


def validar_parcelas_personalizadas(
    valor_total: Decimal,
    parcelas: Sequence[ParcelaPersonalizada],
) -> bool:
    """True sse a soma bate com o total dentro de TOLERANCIA_PARCELAS."""
    return abs(_soma(parcelas) - valor_total) <= TOLERANCIA_PARCELAS


def conferir_parcelas_personalizadas(
    valor_total: Decimal,
    parcelas: Sequence[ParcelaPersonalizada],
) -> Resultado[tuple[Parcela, ...]]:
    """Confere e numera as parcelas na ordem informada."""
    if not parcelas:
        return Resultado.falha(ErroValidacao(mensagem="Adicione pelo menos uma parcela personalizada"))

    if not validar_parcelas_personalizadas(valor_total, parcelas):
        soma = _soma(parcelas)
        return Resultado.falha(
            ErroValidacao(
                mensagem=f"Soma das parcelas (R$ {soma:.2f}) diferente do valor final (R$ {valor_total:.2f})",
                esperado=valor_total,
                obtido=soma,
            )
        )

    return Resultado.sucesso(
        tuple(Parcela(numero=i, valor=p.valor, vencimento=p.vencimento) for i, p in enumerate(parcelas, start=1))
    )


def calcular_dias_atraso(vencimento: date, referencia: date) -> int:
    """Dias corridos apos o vencimento. Nunca negativo."""
    return max(0, (referencia - vencimento).days)


def atualizar_status(parcelas: Sequence[Parcela], referencia: date) -> tuple[Parcela, ...]:
    """Pendente com vencimento anterior a referencia passa a atrasado.

    Puro: recebe data de referencia como parametro, nunca chama date.today().
    """
    return tuple(
        dataclasses.replace(p, status=StatusParcela.ATRASADO)
        if p.status is StatusParcela.PENDENTE and p.vencimento < referencia
        else p
        for p in parcelas
    )
