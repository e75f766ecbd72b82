from __future__ import annotations

import unicodedata

FORMAT_CHARS = ".-/"
ASCII_DIGITS = "0123456789"

_ZWJ = "\u200d"


def clean(raw: str) -> str:
    """
    Remove a pontuação de exibição do CNPJ ('.', '/', '-').
    Qualquer outro caractere é mantido: a validação acontece depois.
    """
    return "".join(ch for ch in raw if ch not in FORMAT_CHARS)


def _extends_previous(ch: str) -> bool:
    # marcas combinantes, seletores de variação e modificadores de tom de pele
    if unicodedata.category(ch) in ("Mn", "Me", "Mc"):
        return True
    return "\U0001F3FB" <= ch <= "\U0001F3FF"


def graphemes(text: str) -> list[str]:
    """
    Quebra o texto em caracteres "percebidos pelo usuário":
    um caractere base seguido das marcas que o estendem conta como um só.
    Ex.: "1\u0301" (1 + acento agudo combinante) -> ["1\u0301"]
    """
    units: list[str] = []
    for ch in text:
        if units and (_extends_previous(ch) or ch == _ZWJ or units[-1].endswith(_ZWJ)):
            units[-1] += ch
        else:
            units.append(ch)
    return units


def is_all_same(units: list[str]) -> bool:
    return len(units) > 0 and len(set(units)) == 1


def parse_digits(units: list[str]) -> list[int] | None:
    """
    Converte cada unidade em um dígito 0-9.
    Retorna None se alguma unidade não for exatamente um dígito ASCII
    (str.isdigit aceitaria '²' e dígitos de outros alfabetos).
    """
    digits: list[int] = []
    for unit in units:
        if len(unit) != 1 or unit not in ASCII_DIGITS:
            return None
        digits.append(ord(unit) - 48)  # '0' -> 48
    return digits
