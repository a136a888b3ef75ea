# valida_br/rules/utils.py
import re
from typing import Any

_NON_DIGITS = re.compile(r'[^0-9]')


def only_digits(value: Any) -> str:
    """Remove todo caractere que não seja dígito decimal. None ou vazio resulta em ""."""
    if value is None:
        return ""
    return _NON_DIGITS.sub('', str(value))


def is_repeated_sequence(digits: str, min_len: int = 11) -> bool:
    """
    Verdadeiro se `digits` é um único dígito repetido pelo menos `min_len` vezes
    (ex: "00000000000"). Usado para barrar documentos degenerados que passariam
    no cálculo dos dígitos verificadores.
    """
    if not digits or len(digits) < min_len:
        return False
    return len(set(digits)) == 1 and digits[0].isdigit()


def mask_value(value: str, visible: int = 3) -> str:
    """Prefixo curto do dado para logs, sem expor o valor completo."""
    if len(value) <= visible:
        return "*" * len(value)
    return f"{value[:visible]}..."
