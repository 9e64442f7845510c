"""Resultado de operacoes que validam entrada de formulario.

ADR: o core nunca decide se uma falha de validacao vira excecao ou mensagem.
Funcoes "validadas" devolvem Resultado; o chamador escolhe entre
desembrulhar() (levanta) ou ler o erro e exibir para o usuario.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Generic, TypeVar

T = TypeVar("T")


class ValidacaoError(ValueError):
    """Falha de validacao de regra de negocio (soma de percentuais, parcelas)."""

    def __init__(self, erro: ErroValidacao) -> None:
        super().__init__(erro.mensagem)
        self.erro = erro


@dataclass(frozen=True)
class ErroValidacao:
    mensagem: str
    esperado: Decimal | None = None
    obtido: Decimal | None = None

    @property
    def diferenca(self) -> Decimal | None:
        if self.esperado is None or self.obtido is None:
            return None
        return self.obtido - self.esperado


@dataclass(frozen=True)
class Resultado(Generic[T]):
    """Sucesso com valor OU falha com ErroValidacao. Nunca os dois."""

    valor: T | None = None
    erro: ErroValidacao | None = None

    def __post_init__(self) -> None:
        if (self.valor is None) == (self.erro is None):
            raise ValueError("Resultado exige exatamente um entre valor e erro")

    @classmethod
    def sucesso(cls, valor: T) -> Resultado[T]:
        return cls(valor=valor)

    @classmethod
    def falha(cls, erro: ErroValidacao) -> Resultado[T]:
        return cls(erro=erro)

    @property
    def ok(self) -> bool:
        return self.erro is None

    def desembrulhar(self, excecao: type[ValidacaoError] = ValidacaoError) -> T:
        """Valor em caso de sucesso; levanta `excecao` em caso de falha."""
        if self.erro is not None:
            raise excecao(self.erro)
        return self.valor  # type: ignore[return-value]
