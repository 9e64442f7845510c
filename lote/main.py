# lote/main.py
#
# Orquestrador do fechamento mensal: le os CSV exportados do ERP, calcula a
# folha, consolida despesas e folha por empresa e gera o resumo do mes.
#
# Design decisions:
#   - run_lote e o unico ponto de entrada; recebe LoteConfig pronto para que
#     os testes nao dependam de variaveis de ambiente.
#   - Ordem estrita: leitura de TODAS as entradas, calculos, e so entao escrita.
#   - Cada etapa loga no stdout via lote.log.
#
# Invariant: nenhum parquet e escrito se alguma entrada estiver ausente ou se
# algum calculo falhar. Saida parcial de um mes e pior que nenhuma saida.
from __future__ import annotations

from dataclasses import asdict
from pathlib import Path

import polars as pl

from lote.arquivos import read_csv, write_parquet
from lote.config import LoteConfig, load_config
from lote.consolidacao import consolidar_despesas, consolidar_folha, resumo_mensal
from lote.folha import calcular_folha_lote
from lote.log import log

ENTRADAS = (
    "colaboradores.csv",
    "despesas.csv",
    "parcelas.csv",
    "rateios_despesas.csv",
    "rateios_colaboradores.csv",
)


def run_lote(config: LoteConfig) -> dict[str, Path]:
    """Run the monthly closing for config.ano/config.mes.

    Returns:
        Mapping of output name to the parquet path written.

    Raises:
        FileNotFoundError: if any input CSV is missing (checked before any
            output is written).
    """
    input_dir = config.input_dir
    faltando = [nome for nome in ENTRADAS if not (input_dir / nome).exists()]
    if faltando:
        raise FileNotFoundError(f"Entradas ausentes em {input_dir}: {', '.join(faltando)}")

    log(f"Competencia {config.mes:02d}/{config.ano}, referencia {config.referencia.isoformat()}")

    # ---- Leitura ----
    log("Reading CSV inputs...")
    colaboradores_df = read_csv(input_dir / "colaboradores.csv")
    despesas_df = read_csv(input_dir / "despesas.csv")
    parcelas_df = read_csv(input_dir / "parcelas.csv")
    rateios_despesas_df = read_csv(input_dir / "rateios_despesas.csv")
    rateios_colaboradores_df = read_csv(input_dir / "rateios_colaboradores.csv")
    log(f"  {len(colaboradores_df):,} colaboradores, {len(despesas_df):,} despesas, {len(parcelas_df):,} parcelas")

    # ---- Calculos ----
    log("Computing payroll...")
    folha_df = calcular_folha_lote(colaboradores_df)
    log(f"  Folha: {len(folha_df):,} holerites")

    log("Consolidating per company...")
    despesas_empresa_df = consolidar_despesas(despesas_df, rateios_despesas_df)
    folha_empresa_df = consolidar_folha(colaboradores_df, rateios_colaboradores_df)
    log(f"  Despesas: {len(despesas_empresa_df):,} linhas, folha: {len(folha_empresa_df):,} empresas")

    log("Computing monthly summary...")
    resumo_df = _resumo_por_empresa(parcelas_df, despesas_empresa_df, config)
    log(f"  Resumo: {len(resumo_df):,} empresas")

    # ---- Escrita ----
    output_dir = config.output_dir
    sufixo = f"{config.ano}_{config.mes:02d}"
    saidas = {
        "folha": write_parquet(folha_df, output_dir / f"folha_{sufixo}.parquet"),
        "despesas_por_empresa": write_parquet(
            despesas_empresa_df, output_dir / f"despesas_por_empresa_{sufixo}.parquet"
        ),
        "folha_por_empresa": write_parquet(folha_empresa_df, output_dir / f"folha_por_empresa_{sufixo}.parquet"),
        "resumo_mensal": write_parquet(resumo_df, output_dir / f"resumo_mensal_{sufixo}.parquet"),
    }
    log(f"Done. Parquet written to: {output_dir}")
    return saidas


def _resumo_por_empresa(
    parcelas_df: pl.DataFrame,
    despesas_empresa_df: pl.DataFrame,
    config: LoteConfig,
) -> pl.DataFrame:
    """One ResumoMensal row per company seen in parcelas or despesas."""
    ids = parcelas_df.get_column("empresa_id").to_list() + despesas_empresa_df.get_column("empresa_id").to_list()
    empresas = sorted({e for e in ids if e is not None})
    rows = []
    for empresa_id in empresas:
        resumo = resumo_mensal(
            parcelas_df.filter(pl.col("empresa_id") == empresa_id),
            despesas_empresa_df.filter(pl.col("empresa_id") == empresa_id),
            config.ano,
            config.mes,
            config.referencia,
        )
        rows.append({"empresa_id": empresa_id, **asdict(resumo)})
    return pl.DataFrame(rows) if rows else pl.DataFrame(schema={"empresa_id": pl.Utf8})


if __name__ == "__main__":
    run_lote(load_config())
