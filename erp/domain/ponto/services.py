"""Horas trabalhadas e banco de horas a partir das quatro batidas do ponto."""

from __future__ import annotations

import re
from decimal import Decimal

_ZERO = Decimal("0")
_SESSENTA = Decimal("60")
_HORARIO = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


def para_minutos(horario: str) -> int:
    """'HH:MM' -> minutos desde 00:00."""
    m = _HORARIO.match(horario.strip())
    if m is None:
        raise ValueError(f"Horario invalido: {horario!r}, esperado HH:MM")
    return int(m.group(1)) * 60 + int(m.group(2))


def _horas_entre(inicio: str, fim: str) -> Decimal:
    minutos = para_minutos(fim) - para_minutos(inicio)
    if minutos < 0:
        # Sem virada de dia: turno noturno nao e suportado.
        raise ValueError(f"Saida {fim} anterior a entrada {inicio}")
    return Decimal(minutos) / _SESSENTA


def calcular_horas_trabalhadas(
    entrada_manha: str | None,
    saida_almoco: str | None,
    entrada_tarde: str | None,
    saida_noite: str | None,
) -> Decimal:
    """Horas do dia.

    Sem entrada da manha ou saida da noite: 0. Sem nenhuma das batidas do
    almoco: conta o periodo inteiro. Caso contrario cada turno so conta com
    as duas batidas presentes.
    """
    if not entrada_manha or not saida_noite:
        return _ZERO

    if not saida_almoco and not entrada_tarde:
        return _horas_entre(entrada_manha, saida_noite)

    horas_manha = _horas_entre(entrada_manha, saida_almoco) if saida_almoco else _ZERO
    horas_tarde = _horas_entre(entrada_tarde, saida_noite) if entrada_tarde else _ZERO
    return horas_manha + horas_tarde


def calcular_banco_horas(
    horas_trabalhadas: Decimal,
    horas_contratadas: Decimal,
    saldo_anterior: Decimal = _ZERO,
) -> Decimal:
    """Saldo acumulado. Persistir entre periodos e responsabilidade do chamador."""
    return saldo_anterior + (horas_trabalhadas - horas_contratadas)


def calcular_horas_extras(horas_trabalhadas: Decimal, horas_contratadas: Decimal) -> Decimal:
    return max(_ZERO, horas_trabalhadas - horas_contratadas)
