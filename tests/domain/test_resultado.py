# tests/domain/test_resultado.py
from decimal import Decimal

import pytest

from erp.domain.shared.resultado import ErroValidacao, Resultado, ValidacaoError


def test_sucesso_desembrulha_valor():
    resultado = Resultado.sucesso(42)
    assert resultado.ok
    assert resultado.desembrulhar() == 42


def test_falha_levanta_validacao_error():
    resultado: Resultado[int] = Resultado.falha(ErroValidacao(mensagem="soma errada"))
    assert not resultado.ok
    with pytest.raises(ValidacaoError, match="soma errada") as exc_info:
        resultado.desembrulhar()
    assert exc_info.value.erro.mensagem == "soma errada"


def test_falha_com_excecao_especifica():
    class Especifica(ValidacaoError):
        pass

    resultado: Resultado[int] = Resultado.falha(ErroValidacao(mensagem="x"))
    with pytest.raises(Especifica):
        resultado.desembrulhar(Especifica)


def test_resultado_exige_exatamente_um():
    with pytest.raises(ValueError, match="exatamente um"):
        Resultado()
    with pytest.raises(ValueError, match="exatamente um"):
        Resultado(valor=1, erro=ErroValidacao(mensagem="x"))


def test_diferenca():
    erro = ErroValidacao(mensagem="x", esperado=Decimal("100"), obtido=Decimal("99.5"))
    assert erro.diferenca == Decimal("-0.5")
    assert ErroValidacao(mensagem="x").diferenca is None
