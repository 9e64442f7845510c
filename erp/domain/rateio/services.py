"""Rateio de valores entre empresas do grupo. Funcoes puras, zero IO."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from decimal import ROUND_HALF_UP, Decimal

from erp.domain.shared.resultado import ErroValidacao, Resultado, ValidacaoError

from .value_objects import TOLERANCIA_RATEIO, CotaRateio, LinhaRateio

_CEM = Decimal("100")
_CENTAVO = Decimal("0.01")


class RateioInvalido(ValidacaoError):
    """Percentuais do rateio nao somam 100%."""


def calcular_rateio(valor_total: Decimal, cotas: Sequence[CotaRateio]) -> tuple[LinhaRateio, ...]:
    """valor_i = valor_total * percentual_i / 100, na ordem de entrada.

    Nao confere a soma dos percentuais; ver validar_rateio / ratear_validado.
    """
    if not cotas:
        raise ValueError("Rateio exige ao menos uma cota")
    if valor_total < Decimal("0"):
        raise ValueError("Valor a ratear nao pode ser negativo")

    return tuple(
        LinhaRateio(
            entidade_id=c.entidade_id,
            percentual=c.percentual,
            valor=valor_total * c.percentual / _CEM,
        )
        for c in cotas
    )


def soma_percentuais(cotas: Iterable[CotaRateio]) -> Decimal:
    return sum((c.percentual for c in cotas), Decimal("0"))


def validar_rateio(cotas: Iterable[CotaRateio], tolerancia: Decimal = TOLERANCIA_RATEIO) -> bool:
    """True sse |soma - 100| < tolerancia."""
    return abs(soma_percentuais(cotas) - _CEM) < tolerancia


def ratear_validado(
    valor_total: Decimal,
    cotas: Sequence[CotaRateio],
    tolerancia: Decimal = TOLERANCIA_RATEIO,
) -> Resultado[tuple[LinhaRateio, ...]]:
    """Rateio com conferencia da soma. Falha vira Resultado, nunca excecao."""
    if not validar_rateio(cotas, tolerancia):
        soma = soma_percentuais(cotas)
        return Resultado.falha(
            ErroValidacao(
                mensagem=f"Percentuais devem somar 100% (atual: {soma:.2f}%)",
                esperado=_CEM,
                obtido=soma,
            )
        )
    return Resultado.sucesso(calcular_rateio(valor_total, cotas))


def rateio_igualitario(entidade_ids: Sequence[str]) -> tuple[CotaRateio, ...]:
    """Divisao inicial sugerida: 100/n arredondado em 2 casas para cada empresa.

    A soma pode ficar a centesimos de 100 (ex.: 3 x 33.33).
    """
    if not entidade_ids:
        raise ValueError("Rateio igualitario exige ao menos uma entidade")
    percentual = (_CEM / len(entidade_ids)).quantize(_CENTAVO, rounding=ROUND_HALF_UP)
    return tuple(CotaRateio(entidade_id=e, percentual=percentual) for e in entidade_ids)


def valor_atribuido(
    valor: Decimal,
    empresa_id: str,
    empresa_dona: str,
    percentuais: Mapping[str, Decimal] | None,
) -> Decimal:
    """Parcela de uma despesa que pesa sobre `empresa_id`.

    Com rateio: so conta se a empresa estiver no mapa. Sem rateio: valor
    integral para a empresa dona, zero para as demais.
    """
    if percentuais:
        percentual = percentuais.get(empresa_id)
        if percentual is None:
            return Decimal("0")
        return valor * percentual / _CEM
    if empresa_dona == empresa_id:
        return valor
    return Decimal("0")
