from __future__ import annotations

import re
from dataclasses import dataclass


def _somente_digitos(raw: str) -> str:
    return "".join(c for c in raw if c.isdigit())


def _digito_modulo_11(digitos: str, pesos: list[int]) -> int:
    soma = sum(int(d) * p for d, p in zip(digitos, pesos, strict=True))
    resto = soma % 11
    return 0 if resto < 2 else 11 - resto


def _verificar_cpf(digitos: str) -> bool:
    """Algoritmo padrao brasileiro de verificacao de CPF."""
    d1 = _digito_modulo_11(digitos[:9], [10, 9, 8, 7, 6, 5, 4, 3, 2])
    if int(digitos[9]) != d1:
        return False
    d2 = _digito_modulo_11(digitos[:10], [11, 10, 9, 8, 7, 6, 5, 4, 3, 2])
    return int(digitos[10]) == d2


def _verificar_cnpj(digitos: str) -> bool:
    """Algoritmo padrao brasileiro de verificacao de CNPJ."""
    d1 = _digito_modulo_11(digitos[:12], [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2])
    if int(digitos[12]) != d1:
        return False
    d2 = _digito_modulo_11(digitos[:13], [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2])
    return int(digitos[13]) == d2


@dataclass(frozen=True)
class CPF:
    """Value Object imutavel para CPF. Valida digitos verificadores no construtor."""

    _valor: str  # sempre 11 digitos

    def __init__(self, raw: str) -> None:
        digitos = _somente_digitos(raw)
        if len(digitos) != 11:
            raise ValueError(f"CPF invalido: comprimento {len(digitos)}, esperado 11")
        if len(set(digitos)) == 1:
            raise ValueError("CPF invalido: todos digitos iguais")
        if not _verificar_cpf(digitos):
            raise ValueError("CPF invalido: digitos verificadores incorretos")
        object.__setattr__(self, "_valor", digitos)

    @property
    def valor(self) -> str:
        return self._valor

    @property
    def formatado(self) -> str:
        """XXX.XXX.XXX-XX"""
        d = self._valor
        return f"{d[:3]}.{d[3:6]}.{d[6:9]}-{d[9:]}"

    def __repr__(self) -> str:
        return f"CPF({self.formatado!r})"

    def __str__(self) -> str:
        return self.formatado


@dataclass(frozen=True)
class CNPJ:
    """Value Object imutavel para CNPJ. Valida digitos verificadores no construtor."""

    _valor: str  # sempre 14 digitos sem formatacao

    def __init__(self, raw: str) -> None:
        digitos = _somente_digitos(raw)
        if len(digitos) != 14:
            raise ValueError(f"CNPJ invalido: comprimento {len(digitos)}, esperado 14")
        if len(set(digitos)) == 1:
            raise ValueError("CNPJ invalido: todos digitos iguais")
        if not _verificar_cnpj(digitos):
            raise ValueError("CNPJ invalido: digitos verificadores incorretos")
        object.__setattr__(self, "_valor", digitos)

    @property
    def valor(self) -> str:
        """14 digitos sem formatacao."""
        return self._valor

    @property
    def formatado(self) -> str:
        """XX.XXX.XXX/XXXX-XX"""
        d = self._valor
        return f"{d[:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:]}"

    def __repr__(self) -> str:
        return f"CNPJ({self.formatado!r})"

    def __str__(self) -> str:
        return self.formatado


def validar_cpf(raw: str) -> bool:
    try:
        CPF(raw)
    except ValueError:
        return False
    return True


def validar_cnpj(raw: str) -> bool:
    try:
        CNPJ(raw)
    except ValueError:
        return False
    return True


def validar_cpf_ou_cnpj(raw: str) -> bool:
    """Decide pelo numero de digitos: 11 = CPF, 14 = CNPJ, outro = invalido."""
    digitos = _somente_digitos(raw)
    if len(digitos) == 11:
        return validar_cpf(digitos)
    if len(digitos) == 14:
        return validar_cnpj(digitos)
    return False


def validar_renavam(raw: str) -> bool:
    return len(_somente_digitos(raw)) == 11


# VIN: 17 caracteres, sem I, O, Q (confundiveis com 1 e 0).
_CHASSI = re.compile(r"^[A-HJ-NPR-Z0-9]{17}$")


def validar_chassi(raw: str) -> bool:
    return _CHASSI.match(re.sub(r"[^A-Za-z0-9]", "", raw).upper()) is not None
