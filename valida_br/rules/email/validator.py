# valida_br/rules/email/validator.py

import re
import logging
from typing import Any

from email_validator import validate_email as check_email_syntax, EmailNotValidError

from valida_br.models.validation_outcome import ValidationOutcome
from valida_br.rules.base import BaseValidator
from valida_br.rules.utils import mask_value

logger = logging.getLogger(__name__)

# Códigos de erro específicos para validação de e-mail
MISSING_EMAIL = "MISSING_EMAIL"
EMAIL_TOO_LONG = "EMAIL_TOO_LONG"
INVALID_FORMAT = "INVALID_FORMAT"
LOCAL_PART_TOO_LONG = "LOCAL_PART_TOO_LONG"

MAX_EMAIL_LENGTH = 254
MAX_LOCAL_PART_LENGTH = 64

# Padrão conservador: local@dominio.tld, sem espaços e com ponto no domínio
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]{2,}$")

# Domínios de e-mails temporários/descartáveis. Apenas informativo, não invalida o e-mail.
DISPOSABLE_DOMAINS = frozenset({
    "tempmail.com", "disposable.com", "throwaway.com", "mailinator.com",
    "guerrillamail.com", "10minutemail.com", "yopmail.com",
})


class EmailValidator(BaseValidator):
    """
    Validador de endereços de e-mail.
    Aplica limites de comprimento e um padrão conservador, e confirma a
    sintaxe com a biblioteca 'email_validator' (sem consulta DNS).
    """

    def __init__(self):
        super().__init__(origin_name="email_validator")

    def validate(self, data: Any, **kwargs) -> ValidationOutcome:
        """
        Valida um endereço de e-mail aplicando as regras em sequência.
        A primeira regra violada determina o resultado.
        """
        email = self._as_text(data).strip()

        # 1. Verificação de input vazio
        if not email:
            return self._failure("E-mail não informado", MISSING_EMAIL)

        # 2. Comprimento total (RFC 5321)
        if len(email) > MAX_EMAIL_LENGTH:
            return self._failure("E-mail muito longo", EMAIL_TOO_LONG)

        # 3. Formato básico
        if not EMAIL_PATTERN.match(email):
            return self._failure("Formato de e-mail inválido", INVALID_FORMAT)

        local_part, domain = email.rsplit("@", 1)
        if len(local_part) > MAX_LOCAL_PART_LENGTH:
            return self._failure("Parte local do e-mail muito longa", LOCAL_PART_TOO_LONG)

        # 4. Confirmação da sintaxe com email_validator
        # `check_deliverability=False` para evitar consultas DNS
        try:
            check_email_syntax(email, check_deliverability=False)
        except EmailNotValidError as e:
            logger.debug(f"Validação de e-mail: '{mask_value(email)}' rejeitado pela email_validator: {e}")
            return self._failure("Formato de e-mail inválido", INVALID_FORMAT)

        domain = domain.lower()
        return self._success(
            normalized=email.lower(),
            metadata={
                "domain": domain,
                "is_disposable": domain in DISPOSABLE_DOMAINS,
            },
        )


_email_validator = EmailValidator()


def validate_email(raw: Any) -> ValidationOutcome:
    return _email_validator.validate(raw)
