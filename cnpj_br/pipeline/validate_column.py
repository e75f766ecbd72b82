# cnpj_br/pipeline/validate_column.py
from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from typing import Literal

import pandas as pd

from cnpj_br.document import Cnpj, validate
from cnpj_br.errors import CnpjError

logger = logging.getLogger(__name__)


StrategyInvalidCnpj = Literal["drop", "keep_mark"]
OutputFormat = Literal["digits", "formatted"]


@dataclass(frozen=True)
class ColumnValidationConfig:
    column: str = "CNPJ"
    valid_column: str = "CNPJ_VALIDO"
    error_column: str = "CNPJ_ERRO"
    strategy_invalid_cnpj: StrategyInvalidCnpj = "keep_mark"
    output_format: OutputFormat = "digits"


# -------------------------
# Normalização por célula
# -------------------------

def _as_text(value: object) -> str:
    """
    Converte a célula para texto:
    - None/NaN viram ""
    - números inteiros viram 14 dígitos com zeros à esquerda
      (ex.: 191 -> "00000000000191"; 11444777000161.0 -> "11444777000161")
    """
    if value is None or value is pd.NA or value is pd.NaT:
        return ""
    if isinstance(value, float):
        if pd.isna(value):
            return ""
        # coluna numérica com vazios vira float64
        if value.is_integer():
            return str(int(value)).zfill(14)
        return str(value)
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return str(value).zfill(14)
    return str(value).strip()


def _cell_error(value: object) -> CnpjError | None:
    return validate(_as_text(value))


def _cell_normalized(value: object, output_format: OutputFormat) -> str:
    text = _as_text(value)
    if validate(text) is not None:
        return ""
    cnpj = Cnpj.from_string(text)
    return cnpj.to_string() if output_format == "formatted" else cnpj.to_unformatted_string()


# -------------------------
# API por Series / DataFrame
# -------------------------

def _require_output_format(output_format: str) -> None:
    if output_format not in ("digits", "formatted"):
        raise ValueError("output_format deve ser 'digits' ou 'formatted'")


def normalize_series(series: pd.Series, output_format: OutputFormat = "digits") -> pd.Series:
    """
    Normaliza uma coluna de CNPJs:
    - válidos -> 14 dígitos (ou "XX.XXX.XXX/YYYY-ZZ" com output_format="formatted")
    - inválidos ou vazios -> ""
    """
    _require_output_format(output_format)
    return series.astype(object).map(lambda v: _cell_normalized(v, output_format))


def error_series(series: pd.Series) -> pd.Series:
    """Motivo da rejeição por linha (valor do CnpjError) ou None quando válido."""

    def _error_value(v: object) -> str | None:
        err = _cell_error(v)
        return err.value if err is not None else None

    return series.astype(object).map(_error_value)


def validate_dataframe(df: pd.DataFrame, config: ColumnValidationConfig | None = None) -> pd.DataFrame:
    """
    Valida a coluna de CNPJ de um DataFrame:
    - marca validade (config.valid_column) e motivo (config.error_column)
    - reescreve o CNPJ das linhas válidas no formato configurado
    - strategy "drop" remove as linhas inválidas; "keep_mark" mantém e só marca
    Retorna uma cópia; o DataFrame original não é alterado.
    """
    cfg = config or ColumnValidationConfig()

    if cfg.strategy_invalid_cnpj not in ("drop", "keep_mark"):
        raise ValueError("strategy_invalid_cnpj deve ser 'drop' ou 'keep_mark'")
    _require_output_format(cfg.output_format)
    if cfg.column not in df.columns:
        raise ValueError(f"Coluna {cfg.column!r} não encontrada. Colunas encontradas: {list(df.columns)}")

    out = df.copy()
    out[cfg.column] = out[cfg.column].astype(object)
    errors = error_series(out[cfg.column])
    out[cfg.error_column] = errors
    out[cfg.valid_column] = errors.isna()

    valid_mask = out[cfg.valid_column]
    out.loc[valid_mask, cfg.column] = normalize_series(out.loc[valid_mask, cfg.column], cfg.output_format)

    n_total = len(out)
    n_valid = int(valid_mask.sum())
    by_error = errors.value_counts(dropna=True).to_dict()
    logger.info(f"Validação de CNPJ: total={n_total}, válidos={n_valid}, inválidos={n_total - n_valid} {by_error}")

    if cfg.strategy_invalid_cnpj == "drop":
        out = out[out[cfg.valid_column]].copy()

    return out
