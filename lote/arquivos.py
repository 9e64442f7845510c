# lote/arquivos.py
#
# Leitura dos CSV exportados do ERP e escrita dos parquet do lote.
#
# Design decisions:
#   - Wrappers finos sobre o IO do Polars: o resto do lote nunca chama
#     polars para arquivo diretamente.
#   - Colunas de id sao sempre lidas como texto (ids podem ser uuid ou ter
#     zeros a esquerda) e colunas de data como Date.
#   - write_parquet cria os diretorios pais.
from __future__ import annotations

from pathlib import Path

import polars as pl

_COLUNAS_TEXTO = ("colaborador_id", "despesa_id", "registro_id", "empresa_id", "contrato_id", "status")
_COLUNAS_DATA = ("data_vencimento",)


def read_csv(path: Path) -> pl.DataFrame:
    """Read an ERP CSV export with ids as text and due dates as Date.

    Raises:
        FileNotFoundError: if ``path`` does not exist.
    """
    if not path.exists():
        raise FileNotFoundError(f"Arquivo de entrada ausente: {path}")

    header = pl.read_csv(path, n_rows=0).columns
    overrides: dict[str, pl.DataType] = {c: pl.Utf8() for c in _COLUNAS_TEXTO if c in header}
    overrides.update({c: pl.Date() for c in _COLUNAS_DATA if c in header})
    return pl.read_csv(path, schema_overrides=overrides)


def write_parquet(df: pl.DataFrame, path: Path) -> Path:
    """Write a DataFrame to Parquet, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    df.write_parquet(path)
    return path
