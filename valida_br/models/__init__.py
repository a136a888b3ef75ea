# valida_br/models/__init__.py
# Importa modelos Pydantic para exposição
from .validation_outcome import ValidationOutcome
from .password_policy import PasswordPolicy, DEFAULT_PASSWORD_POLICY
from .validation_request import DataType, ValidationItem

__all__ = [
    "ValidationOutcome",
    "PasswordPolicy",
    "DEFAULT_PASSWORD_POLICY",
    "DataType",
    "ValidationItem",
]
