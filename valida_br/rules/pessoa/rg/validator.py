# valida_br/rules/pessoa/rg/validator.py

import logging
from typing import Any

from valida_br.models.validation_outcome import ValidationOutcome
from valida_br.rules.base import BaseValidator
from valida_br.rules.utils import only_digits, mask_value

logger = logging.getLogger(__name__)

INVALID_LENGTH = "INVALID_LENGTH"

RG_MIN_LENGTH = 7
RG_MAX_LENGTH = 9


class RGValidator(BaseValidator):
    """
    Validador para números de Registro Geral (RG).
    O dígito verificador depende do órgão emissor de cada estado, por isso
    só o comprimento (7 a 9 dígitos) é verificado.
    """

    def __init__(self):
        super().__init__(origin_name="rg_validator")

    def validate(self, data: Any, **kwargs) -> ValidationOutcome:
        digits = only_digits(data)
        logger.debug(f"Iniciando validação de RG: {mask_value(digits)}")

        if not RG_MIN_LENGTH <= len(digits) <= RG_MAX_LENGTH:
            return self._failure("RG deve ter entre 7 e 9 dígitos", INVALID_LENGTH)

        return self._success(normalized=digits, metadata={"length": len(digits)})


_rg_validator = RGValidator()


def validate_rg(raw: Any) -> ValidationOutcome:
    return _rg_validator.validate(raw)
