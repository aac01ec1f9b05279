"""Generation of valid Brazilian CPF and CNPJ numbers."""

from __future__ import annotations

import random
import string


def calculate_digit(doc: str, position: int) -> str:
    """Compute the mod-11 check digit for ``doc`` starting at weight ``position``."""
    total = 0
    for char in doc:
        total += int(char) * position
        position -= 1
        if position < 2:
            position = 9
    total %= 11
    if total < 2:
        return "0"
    return str(11 - total)


def _random_digits(count: int) -> str:
    return "".join(random.choices(string.digits, k=count))


def generate_cpf() -> str:
    """Return a random, valid 11-digit CPF without punctuation."""
    doc = _random_digits(9)
    doc += calculate_digit(doc, 10)
    doc += calculate_digit(doc, 11)
    return doc


def generate_cnpj() -> str:
    """Return a random, valid 14-digit CNPJ (head office) without punctuation."""
    doc = _random_digits(8) + "0001"
    doc += calculate_digit(doc, 5)
    doc += calculate_digit(doc, 6)
    return doc