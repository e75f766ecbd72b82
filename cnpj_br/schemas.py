from __future__ import annotations

from pydantic import BaseModel, field_validator

from cnpj_br.document import Cnpj, validate
from cnpj_br.errors import CnpjError, error_to_string


class CnpjIn(BaseModel):
    """Entrada com CNPJ em qualquer formato; armazenado com 14 dígitos."""

    cnpj: str

    @field_validator("cnpj")
    @classmethod
    def _normalize_cnpj(cls, value: str) -> str:
        # InvalidCnpjError é ValueError: o pydantic converte em ValidationError
        return Cnpj.from_string(value).to_unformatted_string()


class CnpjOut(BaseModel):
    cnpj: str
    cnpj_digits: str
    base: str
    branch: str
    check_digits: str

    @classmethod
    def from_cnpj(cls, value: Cnpj) -> CnpjOut:
        return cls(
            cnpj=value.to_string(),
            cnpj_digits=value.to_unformatted_string(),
            base=value.base,
            branch=value.branch,
            check_digits=value.check_digits,
        )


class CnpjCheckOut(BaseModel):
    raw: str
    valid: bool
    error: CnpjError | None = None
    message: str | None = None

    @classmethod
    def from_raw(cls, raw: str) -> CnpjCheckOut:
        """Relatório de validação serializável (sem exceção para entrada inválida)."""
        err = validate(raw)
        if err is None:
            return cls(raw=raw, valid=True)
        return cls(raw=raw, valid=False, error=err, message=error_to_string(err))
