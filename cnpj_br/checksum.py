from __future__ import annotations

from typing import Sequence

# Pesos do módulo 11 (primeiro DV: 12 dígitos, segundo DV: 12 dígitos + primeiro DV)
WEIGHTS_FIRST = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
WEIGHTS_SECOND = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def check_digit(digits: Sequence[int], weights: Sequence[int]) -> int:
    """
    Calcula um dígito verificador pelo módulo 11:
      - soma ponderada dos dígitos
      - resto < 2 -> 0, senão 11 - resto
    """
    if len(digits) != len(weights):
        raise ValueError(f"digits e weights com tamanhos diferentes: {len(digits)} != {len(weights)}")

    total = sum(d * w for d, w in zip(digits, weights))
    rem = total % 11
    return 0 if rem < 2 else 11 - rem


def check_digits(payload: Sequence[int]) -> tuple[int, int]:
    """Os dois DVs para os 12 dígitos de base + filial."""
    first = check_digit(payload, WEIGHTS_FIRST)
    second = check_digit([*payload, first], WEIGHTS_SECOND)
    return first, second
