"""
CNPJ como objeto de valor.

Toda instância de Cnpj é válida: base com 8 dígitos, filial com 4 e dígitos
verificadores calculados pelo módulo 11. A única forma de criar uma instância é
pelas fábricas Cnpj.from_parts() e Cnpj.from_string().
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from cnpj_br.checksum import check_digits as compute_check_digits
from cnpj_br.errors import CnpjError, InvalidCnpjError
from cnpj_br.parsing import clean, graphemes, is_all_same, parse_digits

logger = logging.getLogger(__name__)

BASE_LEN = 8
BRANCH_LEN = 4
CHECK_LEN = 2
CNPJ_LEN = BASE_LEN + BRANCH_LEN + CHECK_LEN

_FACTORY_KEY = object()


def _require_str(value: object, name: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} deve ser str, recebido {type(value).__name__}")


def _format_check(first: int, second: int) -> str:
    return f"{first}{second}"


@dataclass(frozen=True)
class Cnpj:
    base: str
    branch: str
    check_digits: str

    def __init__(self, base: str, branch: str, check_digits: str, *, _key: object = None) -> None:
        # a chave não é campo: fields(), asdict(), cópia e pickle veem só os três valores
        if _key is not _FACTORY_KEY:
            raise TypeError("Cnpj não pode ser instanciado diretamente; use Cnpj.from_parts() ou Cnpj.from_string()")
        object.__setattr__(self, "base", base)
        object.__setattr__(self, "branch", branch)
        object.__setattr__(self, "check_digits", check_digits)

    # -------------------------
    # Fábricas
    # -------------------------

    @classmethod
    def from_parts(cls, base: str, branch: str) -> Cnpj:
        """
        Monta o CNPJ a partir da base (8 dígitos) e da filial (4 dígitos),
        calculando os dígitos verificadores.
        """
        _require_str(base, "base")
        _require_str(branch, "branch")

        base_units = graphemes(base)
        branch_units = graphemes(branch)
        if len(base_units) != BASE_LEN or len(branch_units) != BRANCH_LEN:
            raise InvalidCnpjError(CnpjError.INVALID_LENGTH)

        payload = parse_digits(base_units + branch_units)
        if payload is None:
            raise InvalidCnpjError(CnpjError.INVALID_FORMAT)

        return cls(base, branch, _format_check(*compute_check_digits(payload)), _key=_FACTORY_KEY)

    @classmethod
    def from_string(cls, raw: str) -> Cnpj:
        """
        Aceita "XX.XXX.XXX/YYYY-ZZ" ou 14 dígitos sem pontuação.
        Levanta InvalidCnpjError com o primeiro problema encontrado.
        """
        cleaned, error = _check(raw)
        if error is not None:
            logger.debug(f"CNPJ rejeitado ({error.value}): {raw!r}")
            raise InvalidCnpjError(error)
        return cls(cleaned[:8], cleaned[8:12], cleaned[12:], _key=_FACTORY_KEY)

    # -------------------------
    # Formatação
    # -------------------------

    def to_string(self) -> str:
        """BB.BBB.BBB/YYYY-ZZ"""
        b = self.base
        return f"{b[:2]}.{b[2:5]}.{b[5:8]}/{self.branch}-{self.check_digits}"

    def to_unformatted_string(self) -> str:
        return self.base + self.branch + self.check_digits

    def __str__(self) -> str:
        return self.to_string()


def _check(raw: str) -> tuple[str, CnpjError | None]:
    """
    Pipeline de validação, na ordem:
      1. limpa a pontuação
      2. tamanho (14 caracteres)
      3. todos os caracteres iguais
      4. somente dígitos
      5. dígitos verificadores
    A ordem importa: "AAAAAAAAAAAAAA" é ALL_SAME_DIGITS, não INVALID_FORMAT.
    """
    _require_str(raw, "raw")
    cleaned = clean(raw)
    units = graphemes(cleaned)

    if len(units) != CNPJ_LEN:
        return cleaned, CnpjError.INVALID_LENGTH
    if is_all_same(units):
        return cleaned, CnpjError.ALL_SAME_DIGITS

    digits = parse_digits(units)
    if digits is None:
        return cleaned, CnpjError.INVALID_FORMAT

    if list(compute_check_digits(digits[:12])) != digits[12:]:
        return cleaned, CnpjError.INVALID_CHECK_DIGITS
    return cleaned, None


def validate(raw: str) -> CnpjError | None:
    """Retorna o motivo da rejeição, ou None se o CNPJ for válido."""
    return _check(raw)[1]


def is_valid(raw: str) -> bool:
    return validate(raw) is None
