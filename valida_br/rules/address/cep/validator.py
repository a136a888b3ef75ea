# valida_br/rules/address/cep/validator.py

import logging
from types import MappingProxyType
from typing import Any

from valida_br.models.validation_outcome import ValidationOutcome
from valida_br.rules.base import BaseValidator
from valida_br.rules.utils import only_digits, mask_value

logger = logging.getLogger(__name__)

INVALID_LENGTH = "INVALID_LENGTH"

CEP_LENGTH = 8

# Região postal pelo primeiro dígito do CEP
CEP_REGIONS = MappingProxyType({
    "0": "SP",
    "1": "SP",
    "2": "RJ/ES",
    "3": "MG",
    "4": "BA/SE",
    "5": "PE/AL/PB/RN",
    "6": "CE/PI/MA/PA/AP/AM/RR/AC",
    "7": "DF/GO/TO/MT/MS/RO",
    "8": "PR/SC",
    "9": "RS",
})
UNKNOWN_REGION = "unknown"


class CEPValidator(BaseValidator):
    """
    Validador de CEP. Verifica apenas o formato (8 dígitos);
    não há consulta a bases externas de endereços.
    """

    def __init__(self):
        super().__init__(origin_name="cep_validator")

    def validate(self, data: Any, **kwargs) -> ValidationOutcome:
        digits = only_digits(data)
        logger.debug(f"Iniciando validação de CEP: {mask_value(digits)}")

        if len(digits) != CEP_LENGTH:
            return self._failure("CEP deve ter 8 dígitos", INVALID_LENGTH)

        return self._success(
            normalized=f"{digits[:5]}-{digits[5:]}",
            metadata={
                "state_prefix": digits[:2],
                "region": CEP_REGIONS.get(digits[0], UNKNOWN_REGION),
            },
        )


_cep_validator = CEPValidator()


def validate_cep(raw: Any) -> ValidationOutcome:
    return _cep_validator.validate(raw)
