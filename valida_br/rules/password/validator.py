# valida_br/rules/password/validator.py

import re
import logging
from typing import Any, Dict, List, Mapping, Union

from valida_br.models.password_policy import PasswordPolicy, DEFAULT_PASSWORD_POLICY
from valida_br.models.validation_outcome import ValidationOutcome
from valida_br.rules.base import BaseValidator

logger = logging.getLogger(__name__)

PASSWORD_POLICY_VIOLATION = "PASSWORD_POLICY_VIOLATION"

# Valor devolvido em `normalized`: a senha real nunca sai do validador
MASK_TOKEN = "***"

MAX_STRENGTH = 5

UPPER_PATTERN = re.compile(r"[A-Z]")
LOWER_PATTERN = re.compile(r"[a-z]")
NUMBER_PATTERN = re.compile(r"[0-9]")
SYMBOL_PATTERN = re.compile(r'[!@#$%^&*(),.?":{}|<>]')

COMMON_PASSWORDS = frozenset({
    "123456", "password", "123456789", "qwerty", "abc123",
    "111111", "123123", "senha", "admin", "iloveyou",
})


def resolve_policy(policy: Union[PasswordPolicy, Mapping[str, Any], None]) -> PasswordPolicy:
    """
    Aceita uma PasswordPolicy, um dicionário (camelCase ou snake_case) ou None.
    Levanta pydantic.ValidationError se o dicionário for inválido.
    """
    if policy is None:
        return DEFAULT_PASSWORD_POLICY
    if isinstance(policy, PasswordPolicy):
        return policy
    return PasswordPolicy.model_validate(dict(policy))


def password_strength(password: str) -> int:
    strength = 0
    if len(password) >= 8:
        strength += 1
    if len(password) >= 12:
        strength += 1
    if UPPER_PATTERN.search(password):
        strength += 1
    if LOWER_PATTERN.search(password):
        strength += 1
    if NUMBER_PATTERN.search(password):
        strength += 1
    if SYMBOL_PATTERN.search(password):
        strength += 1
    return min(strength, MAX_STRENGTH)


class PasswordValidator(BaseValidator):
    """
    Validador de senha contra uma política configurável.

    Ao contrário dos documentos, acumula todas as regras violadas.
    As mensagens descrevem a propriedade ausente, nunca o conteúdo da senha,
    e a senha não é registrada em log.
    """

    def __init__(self):
        super().__init__(origin_name="password_validator")

    def validate(self, data: Any, policy: Union[PasswordPolicy, Mapping[str, Any], None] = None, **kwargs) -> ValidationOutcome:
        password = self._as_text(data)
        policy = resolve_policy(policy)

        has_upper = bool(UPPER_PATTERN.search(password))
        has_lower = bool(LOWER_PATTERN.search(password))
        has_number = bool(NUMBER_PATTERN.search(password))
        has_symbol = bool(SYMBOL_PATTERN.search(password))

        errors: List[str] = []
        if not password:
            errors.append("Senha não informada")
        if len(password) < policy.min_length:
            errors.append(f"Senha deve ter no mínimo {policy.min_length} caracteres")
        if len(password) > policy.max_length:
            errors.append(f"Senha deve ter no máximo {policy.max_length} caracteres")
        if policy.require_upper and not has_upper:
            errors.append("Ao menos 1 letra maiúscula")
        if policy.require_lower and not has_lower:
            errors.append("Ao menos 1 letra minúscula")
        if policy.require_number and not has_number:
            errors.append("Ao menos 1 número")
        if policy.require_symbol and not has_symbol:
            errors.append("Ao menos 1 símbolo")
        if policy.forbid_common and password.lower() in COMMON_PASSWORDS:
            errors.append("Senha muito comum")
        if password != password.strip():
            errors.append("Senha não pode começar ou terminar com espaços")

        if errors:
            logger.debug(f"Validação de senha: {len(errors)} regra(s) da política violada(s).")
            return self._failure(errors, PASSWORD_POLICY_VIOLATION)

        metadata: Dict[str, Any] = {
            "length": len(password),
            "has_upper": has_upper,
            "has_lower": has_lower,
            "has_number": has_number,
            "has_symbol": has_symbol,
            "strength": password_strength(password),
        }
        return self._success(normalized=MASK_TOKEN, metadata=metadata)


_password_validator = PasswordValidator()


def validate_password(raw: Any, policy: Union[PasswordPolicy, Mapping[str, Any], None] = None) -> ValidationOutcome:
    return _password_validator.validate(raw, policy=policy)
