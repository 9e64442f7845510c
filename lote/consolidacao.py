# lote/consolidacao.py
#
# Consolidacao mensal por empresa: despesas, folha e resumo financeiro.
#
# Design decisions:
#   - Regras de atribuicao vetorizadas em Polars (join + anti-join), sem
#     iter_rows. A regra e a mesma de valor_atribuido no dominio e esta
#     anotada com a fonte para que divergencias aparecam em code review.
#     Source of truth: erp/domain/rateio/services.py :: valor_atribuido
#   - rateios_df e um formato longo unico (registro_id, empresa_id, percentual)
#     usado tanto para despesas (registro_id = despesa_id) quanto para
#     colaboradores (registro_id = colaborador_id).
#   - Saida em Float64: o lote produz parquet para leitura analitica, nao
#     valores de pagamento.
#
# ADR: Colaborador sem rateio pesa integralmente na empresa dona.
#   Colaborador com registros de rateio entra so nas empresas do rateio, na
#   proporcao do percentual.
#   Nao existe "dividir igualmente por falta de rateio": seria um numero que
#   nenhum usuario cadastrou.
#
# Invariants:
#   - Todas as funcoes sao puras sobre DataFrames. Sem IO.
#   - referencia e sempre parametro; nunca date.today().
from __future__ import annotations

from dataclasses import dataclass
from datetime import date

import polars as pl

_STATUS_RECEBIDO = ["pago", "pago_parcial"]
_STATUS_FORA_INADIMPLENCIA = ["pago", "pago_parcial", "cancelado"]

DESPESAS_SCHEMA: dict[str, pl.DataType] = {
    "empresa_id": pl.Utf8(),
    "despesa_id": pl.Utf8(),
    "data_vencimento": pl.Date(),
    "valor_considerado": pl.Float64(),
    "rateada": pl.Boolean(),
}


@dataclass(frozen=True)
class ResumoMensal:
    """Indicadores financeiros de uma empresa em uma competencia."""

    receita_potencial: float
    receita_realizada: float
    valor_inadimplencia: float
    qtd_inadimplencia: int
    despesa_mensal: float
    despesas_com_rateio: int
    lucro: float
    margem: float


def consolidar_despesas(despesas_df: pl.DataFrame, rateios_df: pl.DataFrame) -> pl.DataFrame:
    """Expand expenses into one row per (empresa, despesa) with the attributed value.

    despesas_df: despesa_id, empresa_id (dona), valor, data_vencimento.
    rateios_df:  registro_id, empresa_id, percentual.

    Apportioned expenses produce one row per company in the apportionment
    (valor * percentual / 100). Non-apportioned expenses produce a single row
    with the full value for the owner. Rows with zero value are dropped.
    """
    if despesas_df.is_empty():
        return pl.DataFrame(schema=DESPESAS_SCHEMA)

    despesas = despesas_df.select(
        pl.col("despesa_id").cast(pl.Utf8),
        pl.col("empresa_id").cast(pl.Utf8),
        pl.col("valor").cast(pl.Float64),
        pl.col("data_vencimento").cast(pl.Date),
    )
    rateios = _normalizar_rateios(rateios_df).rename({"registro_id": "despesa_id", "empresa_id": "empresa_rateio"})

    com_rateio = despesas.join(rateios, on="despesa_id", how="inner").select(
        pl.col("empresa_rateio").alias("empresa_id"),
        "despesa_id",
        "data_vencimento",
        (pl.col("valor") * pl.col("percentual") / 100).alias("valor_considerado"),
        pl.lit(True).alias("rateada"),
    )
    sem_rateio = despesas.join(rateios.select("despesa_id").unique(), on="despesa_id", how="anti").select(
        "empresa_id",
        "despesa_id",
        "data_vencimento",
        pl.col("valor").alias("valor_considerado"),
        pl.lit(False).alias("rateada"),
    )

    return (
        pl.concat([com_rateio, sem_rateio])
        .filter(pl.col("valor_considerado") > 0)
        .with_columns(pl.col("valor_considerado").round(2))
        .sort(["empresa_id", "despesa_id"])
    )


def consolidar_folha(colaboradores_df: pl.DataFrame, rateios_df: pl.DataFrame) -> pl.DataFrame:
    """Monthly payroll cost per company.

    colaboradores_df: colaborador_id, empresa_id (dona), salario_base, status (opcional).
    rateios_df:       registro_id, empresa_id, percentual.

    Returns one row per company: empresa_id, folha_mensal,
    qtd_colaboradores, qtd_com_rateio. Only 'ativo' collaborators count
    when the status column exists.
    """
    schema = {
        "empresa_id": pl.Utf8(),
        "folha_mensal": pl.Float64(),
        "qtd_colaboradores": pl.UInt32(),
        "qtd_com_rateio": pl.UInt32(),
    }
    if "status" in colaboradores_df.columns:
        colaboradores_df = colaboradores_df.filter(pl.col("status") == "ativo")
    if colaboradores_df.is_empty():
        return pl.DataFrame(schema=schema)

    colaboradores = colaboradores_df.select(
        pl.col("colaborador_id").cast(pl.Utf8),
        pl.col("empresa_id").cast(pl.Utf8),
        pl.col("salario_base").cast(pl.Float64),
    )
    rateios = _normalizar_rateios(rateios_df).rename(
        {"registro_id": "colaborador_id", "empresa_id": "empresa_rateio"}
    )

    com_rateio = colaboradores.join(rateios, on="colaborador_id", how="inner").select(
        pl.col("empresa_rateio").alias("empresa_id"),
        "colaborador_id",
        (pl.col("salario_base") * pl.col("percentual") / 100).alias("custo"),
        pl.lit(True).alias("rateado"),
    )
    sem_rateio = colaboradores.join(
        rateios.select("colaborador_id").unique(), on="colaborador_id", how="anti"
    ).select(
        "empresa_id",
        "colaborador_id",
        pl.col("salario_base").alias("custo"),
        pl.lit(False).alias("rateado"),
    )

    return (
        pl.concat([com_rateio, sem_rateio])
        .group_by("empresa_id")
        .agg(
            pl.col("custo").sum().round(2).alias("folha_mensal"),
            pl.col("colaborador_id").n_unique().cast(pl.UInt32).alias("qtd_colaboradores"),
            pl.col("colaborador_id").filter(pl.col("rateado")).n_unique().cast(pl.UInt32).alias("qtd_com_rateio"),
        )
        .sort("empresa_id")
    )


def resumo_mensal(
    parcelas_df: pl.DataFrame,
    despesas_empresa_df: pl.DataFrame,
    ano: int,
    mes: int,
    referencia: date,
) -> ResumoMensal:
    """Financial summary of one company for the competence ano/mes.

    parcelas_df:         valor, data_vencimento, status, valor_pago (opcional).
    despesas_empresa_df: output of consolidar_despesas already filtered to the
                         company.

    Delinquent = due before referencia and status not in
    pago / pago_parcial / cancelado. Margin is 0 when there is no revenue.
    """
    parcelas = _do_mes(parcelas_df, ano, mes)
    despesas = _do_mes(despesas_empresa_df, ano, mes)

    if "valor_pago" not in parcelas.columns:
        parcelas = parcelas.with_columns(pl.lit(None, dtype=pl.Float64).alias("valor_pago"))
    # CSV com valor_pago todo vazio chega como texto
    parcelas = parcelas.with_columns(pl.col("valor", "valor_pago").cast(pl.Float64))

    receita_potencial = _soma(parcelas, pl.col("valor"))

    # valor_pago nulo ou zero: parcela "pago" conta integral, "pago_parcial" conta zero.
    recebidas = parcelas.filter(pl.col("status").is_in(_STATUS_RECEBIDO))
    receita_realizada = _soma(
        recebidas,
        pl.when(pl.col("valor_pago").fill_null(0) > 0)
        .then(pl.col("valor_pago"))
        .when(pl.col("status") == "pago")
        .then(pl.col("valor"))
        .otherwise(0),
    )

    inadimplentes = parcelas.filter(
        (pl.col("data_vencimento") < pl.lit(referencia))
        & ~pl.col("status").is_in(_STATUS_FORA_INADIMPLENCIA)
    )

    despesa_mensal = _soma(despesas, pl.col("valor_considerado"))
    despesas_com_rateio = (
        despesas.filter(pl.col("rateada")).height if "rateada" in despesas.columns else 0
    )

    lucro = receita_potencial - despesa_mensal
    margem = lucro / receita_potencial * 100 if receita_potencial > 0 else 0.0

    return ResumoMensal(
        receita_potencial=round(receita_potencial, 2),
        receita_realizada=round(receita_realizada, 2),
        valor_inadimplencia=round(_soma(inadimplentes, pl.col("valor")), 2),
        qtd_inadimplencia=inadimplentes.height,
        despesa_mensal=round(despesa_mensal, 2),
        despesas_com_rateio=despesas_com_rateio,
        lucro=round(lucro, 2),
        margem=round(margem, 2),
    )


def _normalizar_rateios(rateios_df: pl.DataFrame) -> pl.DataFrame:
    return rateios_df.select(
        pl.col("registro_id").cast(pl.Utf8),
        pl.col("empresa_id").cast(pl.Utf8),
        pl.col("percentual").cast(pl.Float64),
    )


def _do_mes(df: pl.DataFrame, ano: int, mes: int) -> pl.DataFrame:
    if df.is_empty():
        return df
    return df.filter(
        (pl.col("data_vencimento").dt.year() == ano) & (pl.col("data_vencimento").dt.month() == mes)
    )


def _soma(df: pl.DataFrame, expr: pl.Expr) -> float:
    if df.is_empty():
        return 0.0
    return float(df.select(expr.cast(pl.Float64).sum()).item() or 0.0)
