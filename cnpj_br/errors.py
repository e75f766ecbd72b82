from __future__ import annotations

from enum import Enum


class CnpjError(str, Enum):
    """Motivos (fechados) pelos quais um CNPJ é rejeitado."""

    INVALID_LENGTH = "invalid_length"
    INVALID_FORMAT = "invalid_format"
    INVALID_CHECK_DIGITS = "invalid_check_digits"
    ALL_SAME_DIGITS = "all_same_digits"


_MESSAGES: dict[CnpjError, str] = {
    CnpjError.INVALID_LENGTH: "CNPJ inválido: quantidade de dígitos incorreta",
    CnpjError.INVALID_FORMAT: "CNPJ inválido: contém caracteres que não são dígitos",
    CnpjError.INVALID_CHECK_DIGITS: "CNPJ inválido: dígitos verificadores não conferem",
    CnpjError.ALL_SAME_DIGITS: "CNPJ inválido: todos os dígitos são iguais",
}


def error_to_string(error: CnpjError) -> str:
    """Mensagem legível para o erro."""
    return _MESSAGES[CnpjError(error)]


class InvalidCnpjError(ValueError):
    """
    Levantada pelas fábricas de Cnpj quando a entrada é inválida.
    O motivo fica disponível em `.error`.
    """

    def __init__(self, error: CnpjError) -> None:
        self.error = CnpjError(error)
        super().__init__(error_to_string(self.error))
