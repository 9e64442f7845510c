# tests/domain/test_cnpj_vo.py
import dataclasses

import pytest

from erp.domain.validacao.documentos import (
    CNPJ,
    validar_chassi,
    validar_cnpj,
    validar_cpf_ou_cnpj,
    validar_renavam,
)


def test_cnpj_valido_formatado():
    """Aceita CNPJ com pontuacao e armazena sem formatacao."""
    cnpj = CNPJ("11.222.333/0001-81")
    assert cnpj.valor == "11222333000181"


def test_cnpj_valido_sem_formatacao():
    """Aceita CNPJ sem pontuacao e gera formatacao."""
    cnpj = CNPJ("11222333000181")
    assert cnpj.formatado == "11.222.333/0001-81"


def test_cnpj_digitos_verificadores_invalidos():
    with pytest.raises(ValueError, match="CNPJ invalido"):
        CNPJ("11.222.333/0001-99")


def test_cnpj_todos_iguais_invalido():
    with pytest.raises(ValueError):
        CNPJ("00.000.000/0000-00")
    with pytest.raises(ValueError):
        CNPJ("11111111111111")


def test_cnpj_comprimento_errado():
    with pytest.raises(ValueError):
        CNPJ("123")
    with pytest.raises(ValueError):
        CNPJ("123456789012345")


def test_cnpj_imutavel():
    cnpj = CNPJ("11222333000181")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cnpj._valor = "outro"  # type: ignore[misc]


def test_cnpj_igualdade_por_valor():
    a = CNPJ("11222333000181")
    b = CNPJ("11.222.333/0001-81")
    assert a == b
    assert hash(a) == hash(b)


def test_cnpj_desigualdade():
    assert CNPJ("11222333000181") != CNPJ("33000167000101")


def test_validar_cnpj():
    assert validar_cnpj("11222333000181") is True
    assert validar_cnpj("33.000.167/0001-01") is True
    assert validar_cnpj("11222333000182") is False


def test_validar_cpf_ou_cnpj_decide_pelo_tamanho():
    assert validar_cpf_ou_cnpj("111.444.777-35") is True
    assert validar_cpf_ou_cnpj("11.222.333/0001-81") is True
    assert validar_cpf_ou_cnpj("1234567890") is False


def test_renavam():
    assert validar_renavam("12345678901") is True
    assert validar_renavam("1234567890") is False
    assert validar_renavam("1234567890A") is False
    # pontuacao e ignorada, so os digitos contam
    assert validar_renavam("1234.567.890-1") is True
    assert validar_renavam("RENAVAM 12345678901") is True


def test_chassi():
    assert validar_chassi("9BWZZZ377VT004251") is True
    assert validar_chassi("9bwzzz377vt004251") is True
    assert validar_chassi("9BW-ZZZ377VT004251") is True
    assert validar_chassi(" 9BW ZZZ 377 VT 004251 ") is True
    # I, O e Q nao existem em VIN
    assert validar_chassi("9BWZZZ377VT00425I") is False
    assert validar_chassi("9BWZZZ377VT0042") is False
