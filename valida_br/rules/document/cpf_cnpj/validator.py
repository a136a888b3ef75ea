# valida_br/rules/document/cpf_cnpj/validator.py
import logging
from types import MappingProxyType
from typing import Any, Sequence

from valida_br.models.validation_outcome import ValidationOutcome
from valida_br.rules.base import BaseValidator
from valida_br.rules.utils import only_digits, is_repeated_sequence, mask_value

logger = logging.getLogger(__name__)

# Códigos de erro para documentos
INVALID_LENGTH = "INVALID_LENGTH"
REPEATED_SEQUENCE = "REPEATED_SEQUENCE"
INVALID_CHECK_DIGIT = "INVALID_CHECK_DIGIT"

CPF_LENGTH = 11
CNPJ_LENGTH = 14

# Região fiscal de emissão do CPF, indicada pelo 9º dígito
CPF_REGIONS = MappingProxyType({
    "0": "RS",
    "1": "DF, GO, MS, MT, TO",
    "2": "AC, AM, AP, PA, RO, RR",
    "3": "CE, MA, PI",
    "4": "AL, PB, PE, RN",
    "5": "BA, SE",
    "6": "MG",
    "7": "ES, RJ",
    "8": "SP",
    "9": "PR, SC",
})
UNKNOWN_REGION = "unknown"

CNPJ_WEIGHTS_1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
CNPJ_WEIGHTS_2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def _weighted_sum(digits: str, weights: Sequence[int]) -> int:
    return sum(int(digit) * weight for digit, weight in zip(digits, weights))


def _cpf_check_digit(base: str) -> int:
    """Dígito verificador do CPF: pesos decrescentes até 2, (soma * 10) % 11, 10 vira 0."""
    weights = range(len(base) + 1, 1, -1)
    remainder = (_weighted_sum(base, weights) * 10) % 11
    return 0 if remainder >= 10 else remainder


def _cnpj_check_digit(base: str, weights: Sequence[int]) -> int:
    remainder = _weighted_sum(base, weights) % 11
    return 0 if remainder < 2 else 11 - remainder


def format_cpf(digits: str) -> str:
    return f"{digits[:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:]}"


def format_cnpj(digits: str) -> str:
    return f"{digits[:2]}.{digits[2:5]}.{digits[5:8]}/{digits[8:12]}-{digits[12:]}"


class CpfValidator(BaseValidator):
    """
    Validador de CPF (cadastro de pessoa física, 11 dígitos).

    As falhas são verificadas em ordem e apenas a primeira é reportada:
    comprimento, sequência repetida, dígitos verificadores.
    """

    def __init__(self):
        super().__init__(origin_name="cpf_validator")

    def validate(self, data: Any, **kwargs) -> ValidationOutcome:
        digits = only_digits(data)
        logger.debug(f"Iniciando validação de CPF: {mask_value(digits)}")

        if len(digits) != CPF_LENGTH:
            return self._failure("CPF deve ter exatamente 11 dígitos", INVALID_LENGTH)

        if is_repeated_sequence(digits, CPF_LENGTH):
            return self._failure("CPF inválido (sequência repetida)", REPEATED_SEQUENCE)

        if (_cpf_check_digit(digits[:9]) != int(digits[9])
                or _cpf_check_digit(digits[:10]) != int(digits[10])):
            return self._failure("Dígito verificador inválido", INVALID_CHECK_DIGIT)

        return self._success(
            normalized=format_cpf(digits),
            metadata={"region": CPF_REGIONS.get(digits[8], UNKNOWN_REGION)},
        )


class CnpjValidator(BaseValidator):
    """
    Validador de CNPJ (cadastro nacional de pessoa jurídica, 14 dígitos).
    Mesma ordem de verificação do CPF.
    """

    def __init__(self):
        super().__init__(origin_name="cnpj_validator")

    def validate(self, data: Any, **kwargs) -> ValidationOutcome:
        digits = only_digits(data)
        logger.debug(f"Iniciando validação de CNPJ: {mask_value(digits)}")

        if len(digits) != CNPJ_LENGTH:
            return self._failure("CNPJ deve ter exatamente 14 dígitos", INVALID_LENGTH)

        if is_repeated_sequence(digits, CNPJ_LENGTH):
            return self._failure("CNPJ inválido (sequência repetida)", REPEATED_SEQUENCE)

        first = _cnpj_check_digit(digits[:12], CNPJ_WEIGHTS_1)
        second = _cnpj_check_digit(digits[:13], CNPJ_WEIGHTS_2)
        if first != int(digits[12]) or second != int(digits[13]):
            return self._failure("Dígitos verificadores inválidos", INVALID_CHECK_DIGIT)

        return self._success(
            normalized=format_cnpj(digits),
            metadata={"state_prefix": digits[:2]},
        )


_cpf_validator = CpfValidator()
_cnpj_validator = CnpjValidator()


def validate_cpf(raw: Any) -> ValidationOutcome:
    return _cpf_validator.validate(raw)


def validate_cnpj(raw: Any) -> ValidationOutcome:
    return _cnpj_validator.validate(raw)
