# valida_br/rules/pessoa/nome/validator.py
import logging
import re
from typing import Any, List, Tuple

from valida_br.models.validation_outcome import ValidationOutcome
from valida_br.rules.base import BaseValidator

logger = logging.getLogger(__name__)

TOO_SHORT = "TOO_SHORT"
TOO_LONG = "TOO_LONG"
INVALID_CHARACTERS = "INVALID_CHARACTERS"

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100

# Letras latinas (inclusive acentuadas, sem × e ÷), apóstrofo, hífen e espaços
NAME_PATTERN = re.compile(r"^[A-Za-zÀ-ÖØ-öø-ÿ\s'-]+$")
WHITESPACE_RUN = re.compile(r"\s+")


class NomeValidator(BaseValidator):
    """
    Validador de nomes de pessoas.
    Acumula todas as violações encontradas; o código de erro reportado é o
    da primeira delas. Em caso de sucesso, colapsa espaços repetidos.
    """

    def __init__(self):
        super().__init__(origin_name="nome_validator")

    def validate(self, data: Any, **kwargs) -> ValidationOutcome:
        nome = self._as_text(data).strip()

        violations: List[Tuple[str, str]] = []
        if len(nome) < NAME_MIN_LENGTH:
            violations.append(("Nome muito curto", TOO_SHORT))
        if len(nome) > NAME_MAX_LENGTH:
            violations.append(("Nome muito longo", TOO_LONG))
        if nome and not NAME_PATTERN.match(nome):
            violations.append(("Nome contém caracteres inválidos", INVALID_CHARACTERS))

        if violations:
            return self._failure([message for message, _ in violations], violations[0][1])

        normalized_name = WHITESPACE_RUN.sub(" ", nome)
        return self._success(
            normalized=normalized_name,
            metadata={
                "word_count": len(normalized_name.split(" ")),
                "length": len(normalized_name),
            },
        )


_nome_validator = NomeValidator()


def validate_name(raw: Any) -> ValidationOutcome:
    return _nome_validator.validate(raw)
