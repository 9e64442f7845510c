# lote/config.py
#
# Configuracao do lote mensal carregada de variaveis de ambiente.
#
# Design decisions:
#   - Frozen dataclass (nao pydantic Settings): o lote e um processo offline e
#     pydantic fica reservado para a camada HTTP.
#   - LOTE_ANO / LOTE_MES nao tem default: rodar a competencia errada gera
#     folha e resumo do mes errado sem nenhum erro visivel.
#   - LOTE_REFERENCIA (data usada para inadimplencia) default = primeiro dia
#     apos a competencia, ou seja, o mes fechado.
from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from dateutil.relativedelta import relativedelta
from dotenv import load_dotenv

load_dotenv()

_LOTE_DIR = Path(__file__).parent


@dataclass(frozen=True)
class LoteConfig:
    """Immutable batch configuration.

    Invariants:
      - 1 <= mes <= 12.
      - referencia is a concrete date (never resolved from date.today()).
    """

    data_dir: Path
    ano: int
    mes: int
    referencia: date

    def __post_init__(self) -> None:
        if not 1 <= self.mes <= 12:
            raise ValueError(f"LOTE_MES invalido: {self.mes}")

    @property
    def input_dir(self) -> Path:
        """CSV de entrada exportados do ERP."""
        return self.data_dir / "input"

    @property
    def output_dir(self) -> Path:
        """Parquet gerados pelo lote."""
        return self.data_dir / "output"


def load_config() -> LoteConfig:
    """Build LoteConfig from environment variables.

    Raises:
        ValueError: if LOTE_ANO or LOTE_MES is missing or malformed.
    """
    ano_raw = os.environ.get("LOTE_ANO")
    mes_raw = os.environ.get("LOTE_MES")
    if not ano_raw or not mes_raw:
        raise ValueError(
            "LOTE_ANO e LOTE_MES sao obrigatorios. "
            "Defina a competencia antes de rodar o lote."
        )
    ano, mes = int(ano_raw), int(mes_raw)

    referencia_raw = os.environ.get("LOTE_REFERENCIA")
    if referencia_raw:
        referencia = date.fromisoformat(referencia_raw)
    else:
        referencia = date(ano, mes, 1) + relativedelta(months=1)

    return LoteConfig(
        data_dir=Path(os.environ.get("LOTE_DATA_DIR", str(_LOTE_DIR / "data"))),
        ano=ano,
        mes=mes,
        referencia=referencia,
    )
