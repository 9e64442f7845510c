# tests/domain/test_parcelamento.py
import dataclasses
from datetime import date
from decimal import Decimal

import pytest

from erp.domain.parcelamento.services import (
    ParcelasInvalidas,
    atualizar_status,
    calcular_dias_atraso,
    calcular_valor_final,
    conferir_parcelas_personalizadas,
    gerar_parcelas_mensais,
    validar_parcelas_personalizadas,
)
from erp.domain.parcelamento.value_objects import Parcela, ParcelaPersonalizada, StatusParcela


def test_parcelas_1000_em_3():
    """Resto da divisao vai para a ultima parcela."""
    parcelas = gerar_parcelas_mensais(Decimal("1000"), 3, date(2024, 1, 1))
    assert [p.valor for p in parcelas] == [Decimal("333.33"), Decimal("333.33"), Decimal("333.34")]
    assert [p.vencimento for p in parcelas] == [date(2024, 1, 1), date(2024, 2, 1), date(2024, 3, 1)]
    assert [p.numero for p in parcelas] == [1, 2, 3]


def test_parcelas_1200_em_12():
    parcelas = gerar_parcelas_mensais(Decimal("1200"), 12, date(2024, 1, 10))
    assert all(p.valor == Decimal("100") for p in parcelas)
    assert parcelas[-1].vencimento == date(2024, 12, 10)


def test_parcelas_soma_exata_ao_centavo():
    parcelas = gerar_parcelas_mensais(Decimal("999.99"), 7, date(2024, 1, 1))
    assert sum(p.valor for p in parcelas) == Decimal("999.99")


def test_parcelas_status_inicial_pendente():
    parcelas = gerar_parcelas_mensais(Decimal("100"), 2, date(2024, 1, 1))
    assert all(p.status is StatusParcela.PENDENTE for p in parcelas)


def test_parcelas_mes_calendario_fim_de_mes():
    """31/01 + 1 mes cai no ultimo dia de fevereiro (2024 bissexto)."""
    parcelas = gerar_parcelas_mensais(Decimal("300"), 3, date(2024, 1, 31))
    assert [p.vencimento for p in parcelas] == [date(2024, 1, 31), date(2024, 2, 29), date(2024, 3, 31)]


def test_parcela_unica():
    parcelas = gerar_parcelas_mensais(Decimal("50.55"), 1, date(2024, 5, 5))
    assert len(parcelas) == 1
    assert parcelas[0].valor == Decimal("50.55")


def test_parcelas_zero_levanta():
    with pytest.raises(ValueError, match=">= 1"):
        gerar_parcelas_mensais(Decimal("1000"), 0, date(2024, 1, 1))


def test_parcelas_valor_negativo_levanta():
    with pytest.raises(ValueError, match="negativo"):
        gerar_parcelas_mensais(Decimal("-1"), 2, date(2024, 1, 1))


def test_parcelas_valor_alem_da_precisao_levanta():
    with pytest.raises(ValueError, match="intervalo suportado"):
        gerar_parcelas_mensais(Decimal("1e27"), 3, date(2024, 1, 1))


def test_parcela_numero_comeca_em_1():
    with pytest.raises(ValueError):
        Parcela(numero=0, valor=Decimal("10"), vencimento=date(2024, 1, 1))


def test_parcela_imutavel():
    parcela = Parcela(numero=1, valor=Decimal("10"), vencimento=date(2024, 1, 1))
    with pytest.raises(dataclasses.FrozenInstanceError):
        parcela.valor = Decimal("20")  # type: ignore[misc]


def test_valor_final_com_desconto_e_acrescimo():
    assert calcular_valor_final(Decimal("1000"), Decimal("100"), Decimal("50")) == Decimal("950")


def test_valor_final_negativo_levanta():
    with pytest.raises(ValueError):
        calcular_valor_final(Decimal("1000"), desconto=Decimal("-1"))


def _personalizadas(*valores: str) -> list[ParcelaPersonalizada]:
    return [ParcelaPersonalizada(valor=Decimal(v), vencimento=date(2024, i, 10)) for i, v in enumerate(valores, 1)]


def test_personalizadas_dentro_da_tolerancia():
    """Diferenca de ate R$ 0,10 e aceita (inclusive)."""
    assert validar_parcelas_personalizadas(Decimal("1000"), _personalizadas("500", "500")) is True
    assert validar_parcelas_personalizadas(Decimal("1000"), _personalizadas("500", "499.90")) is True


def test_personalizadas_fora_da_tolerancia():
    assert validar_parcelas_personalizadas(Decimal("1000"), _personalizadas("500", "499.89")) is False
    assert validar_parcelas_personalizadas(Decimal("1000"), _personalizadas("600", "500")) is False


def test_conferir_personalizadas_numera_na_ordem():
    resultado = conferir_parcelas_personalizadas(Decimal("1000"), _personalizadas("300", "700"))
    parcelas = resultado.desembrulhar()
    assert [p.numero for p in parcelas] == [1, 2]
    assert [p.valor for p in parcelas] == [Decimal("300"), Decimal("700")]


def test_conferir_personalizadas_lista_vazia():
    resultado = conferir_parcelas_personalizadas(Decimal("1000"), [])
    assert not resultado.ok
    assert resultado.erro is not None
    assert resultado.erro.mensagem == "Adicione pelo menos uma parcela personalizada"


def test_conferir_personalizadas_soma_divergente():
    resultado = conferir_parcelas_personalizadas(Decimal("1000"), _personalizadas("300", "600"))
    assert resultado.erro is not None
    assert "R$ 900.00" in resultado.erro.mensagem
    assert resultado.erro.diferenca == Decimal("-100")
    with pytest.raises(ParcelasInvalidas):
        resultado.desembrulhar(ParcelasInvalidas)


def test_dias_atraso():
    assert calcular_dias_atraso(date(2024, 1, 10), date(2024, 1, 15)) == 5
    assert calcular_dias_atraso(date(2024, 1, 10), date(2024, 1, 10)) == 0
    assert calcular_dias_atraso(date(2024, 1, 10), date(2024, 1, 1)) == 0


def test_atualizar_status_marca_atrasadas():
    parcelas = [
        Parcela(numero=1, valor=Decimal("10"), vencimento=date(2024, 1, 1)),
        Parcela(numero=2, valor=Decimal("10"), vencimento=date(2024, 2, 1), status=StatusParcela.PAGO),
        Parcela(numero=3, valor=Decimal("10"), vencimento=date(2024, 3, 1)),
    ]
    atualizadas = atualizar_status(parcelas, referencia=date(2024, 2, 15))
    assert [p.status for p in atualizadas] == [
        StatusParcela.ATRASADO,
        StatusParcela.PAGO,
        StatusParcela.PENDENTE,
    ]
    # Entrada nao e modificada
    assert parcelas[0].status is StatusParcela.PENDENTE


def test_atualizar_status_vencimento_no_dia_nao_atrasa():
    parcelas = [Parcela(numero=1, valor=Decimal("10"), vencimento=date(2024, 1, 1))]
    assert atualizar_status(parcelas, referencia=date(2024, 1, 1))[0].status is StatusParcela.PENDENTE
