"""Formatacao para exibicao (padrao pt-BR). Funcoes puras, nunca levantam."""

from __future__ import annotations

import re
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

_CENTAVO = Decimal("0.01")


def remover_formatacao(valor: str) -> str:
    """Apenas os digitos."""
    return "".join(c for c in valor if c.isdigit())


def _mascarar(digitos: str, passos: list[tuple[str, str]]) -> str:
    # Cada passo substitui apenas a primeira ocorrencia, permitindo mascara parcial.
    for padrao, troca in passos:
        digitos = re.sub(padrao, troca, digitos, count=1)
    return digitos


def formatar_cpf(valor: str) -> str:
    """XXX.XXX.XXX-XX, aplicando a mascara ate onde houver digitos."""
    return _mascarar(
        remover_formatacao(valor)[:11],
        [
            (r"(\d{3})(\d)", r"\1.\2"),
            (r"(\d{3})(\d)", r"\1.\2"),
            (r"(\d{3})(\d{1,2})", r"\1-\2"),
        ],
    )


def formatar_cnpj(valor: str) -> str:
    """XX.XXX.XXX/XXXX-XX, aplicando a mascara ate onde houver digitos."""
    return _mascarar(
        remover_formatacao(valor)[:14],
        [
            (r"(\d{2})(\d)", r"\1.\2"),
            (r"(\d{3})(\d)", r"\1.\2"),
            (r"(\d{3})(\d)", r"\1/\2"),
            (r"(\d{4})(\d{1,2})", r"\1-\2"),
        ],
    )


def formatar_cpf_ou_cnpj(valor: str) -> str:
    if len(remover_formatacao(valor)) <= 11:
        return formatar_cpf(valor)
    return formatar_cnpj(valor)


def formatar_telefone(valor: str) -> str:
    """(XX) XXXX-XXXX para fixo, (XX) XXXXX-XXXX para celular."""
    digitos = remover_formatacao(valor)[:11]
    if len(digitos) <= 10:
        return re.sub(r"(\d{2})(\d{4})(\d{4})", r"(\1) \2-\3", digitos, count=1)
    return re.sub(r"(\d{2})(\d{5})(\d{4})", r"(\1) \2-\3", digitos, count=1)


def formatar_cep(valor: str) -> str:
    return re.sub(r"(\d{5})(\d{3})", r"\1-\2", remover_formatacao(valor)[:8], count=1)


def formatar_placa(valor: str) -> str:
    limpo = re.sub(r"[^A-Za-z0-9]", "", valor).upper()[:7]
    return re.sub(r"(\w{3})(\w{4})", r"\1-\2", limpo, count=1)


def _centavos(valor: Decimal | int | float) -> Decimal | None:
    """None para NaN, infinito ou valor alem da precisao do Decimal."""
    try:
        numero = Decimal(str(valor))
        if not numero.is_finite():
            return None
        return numero.quantize(_CENTAVO, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return None


def formatar_moeda(valor: Decimal | int | float) -> str:
    """R$ 1.234,56 / -R$ 1.000,00"""
    quantizado = _centavos(valor)
    if quantizado is None:
        return ""
    sinal = "-" if quantizado < 0 else ""
    inteiro, centavos = f"{abs(quantizado):.2f}".split(".")
    milhares = f"{int(inteiro):,}".replace(",", ".")
    return f"{sinal}R$ {milhares},{centavos}"


def formatar_porcentagem(valor: Decimal | int | float) -> str:
    quantizado = _centavos(valor)
    if quantizado is None:
        return ""
    return f"{quantizado:.2f}%"


def formatar_data(data: date | str) -> str:
    """DD/MM/AAAA. Entrada invalida devolve string vazia."""
    if isinstance(data, str):
        try:
            data = date.fromisoformat(data[:10])
        except ValueError:
            return ""
    return data.strftime("%d/%m/%Y")
