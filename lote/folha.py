# lote/folha.py
#
# Folha de pagamento em lote: um holerite por linha de colaborador.
#
# Design decisions:
#   - Cada linha passa pelo calculo do dominio (erp.domain.folha.services).
#     Ao contrario das regras vetorizadas de consolidacao, INSS/IRPF por faixa
#     nao sao duplicados aqui: divergencia entre holerite da API e holerite do
#     lote seria um bug de pagamento.
#   - iter_rows e aceitavel: uma linha por colaborador, volume pequeno.
#   - Valores de entrada passam por Decimal(str(v)) para nao herdar erro de
#     float do CSV; a saida volta para Float64 arredondado em 2 casas.
#
# Invariants:
#   - calcular_folha_lote e pura sobre DataFrames. Sem IO.
#   - salario_liquido == salario_base + total_adicionais - total_descontos.
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

import polars as pl

from erp.domain.folha.entities import Adicionais, Descontos
from erp.domain.folha.services import calcular_salario_liquido

_CENTAVO = Decimal("0.01")

# Colunas opcionais de entrada -> campo do dominio. Ausente = 0.
_COLUNAS_ADICIONAIS: dict[str, str] = {
    "vale_transporte": "vale_transporte",
    "vale_alimentacao": "vale_alimentacao",
    "bonus": "bonus",
    "outros_adicionais": "outros",
}
_COLUNAS_DESCONTOS: dict[str, str] = {
    "plano_saude": "plano_saude",
    "adiantamentos": "adiantamentos",
    "outros_descontos": "outros",
}

FOLHA_SCHEMA: dict[str, pl.DataType] = {
    "colaborador_id": pl.Utf8(),
    "empresa_id": pl.Utf8(),
    "salario_base": pl.Float64(),
    "total_adicionais": pl.Float64(),
    "inss": pl.Float64(),
    "irpf": pl.Float64(),
    "total_descontos": pl.Float64(),
    "salario_liquido": pl.Float64(),
}


def calcular_folha_lote(colaboradores_df: pl.DataFrame) -> pl.DataFrame:
    """Compute one payslip per collaborator row.

    Required columns: colaborador_id, empresa_id, salario_base.
    Optional columns: dependentes, vale_transporte, vale_alimentacao, bonus,
    outros_adicionais, plano_saude, adiantamentos, outros_descontos, status.
    Rows with status other than 'ativo' are skipped when the column exists.

    Raises:
        ValueError: if a salary or dependents value is negative.
    """
    if "status" in colaboradores_df.columns:
        colaboradores_df = colaboradores_df.filter(pl.col("status") == "ativo")

    rows: list[dict[str, object]] = []
    for row in colaboradores_df.iter_rows(named=True):
        adicionais = Adicionais(
            **{campo: _decimal(row.get(coluna)) for coluna, campo in _COLUNAS_ADICIONAIS.items()}
        )
        descontos = Descontos(
            **{campo: _decimal(row.get(coluna)) for coluna, campo in _COLUNAS_DESCONTOS.items()}
        )
        salario = _decimal(row["salario_base"])
        resultado = calcular_salario_liquido(
            salario,
            adicionais=adicionais,
            descontos=descontos,
            dependentes=int(row.get("dependentes") or 0),
        )
        rows.append(
            {
                "colaborador_id": str(row["colaborador_id"]),
                "empresa_id": str(row["empresa_id"]),
                "salario_base": _float(salario),
                "total_adicionais": _float(resultado.total_adicionais),
                "inss": _float(resultado.inss),
                "irpf": _float(resultado.irpf),
                "total_descontos": _float(resultado.total_descontos),
                "salario_liquido": _float(resultado.salario_liquido),
            }
        )

    if not rows:
        return pl.DataFrame(schema=FOLHA_SCHEMA)
    return pl.DataFrame(rows, schema=FOLHA_SCHEMA)


def _decimal(valor: object) -> Decimal:
    if valor is None:
        return Decimal("0")
    return Decimal(str(valor))


def _float(valor: Decimal) -> float:
    return float(valor.quantize(_CENTAVO, rounding=ROUND_HALF_UP))
