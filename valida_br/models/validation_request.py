# valida_br/models/validation_request.py
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field

from .password_policy import PasswordPolicy


class DataType(str, Enum):
    """Tags dos tipos de dado suportados."""
    CPF = "cpf"
    CNPJ = "cnpj"
    EMAIL = "email"
    PASSWORD = "password"
    PHONE_BR = "phone-br"
    CEP = "cep"
    RG = "rg"
    NAME = "name"

    @classmethod
    def from_tag(cls, tag: Any) -> Optional["DataType"]:
        """Converte uma tag (string ou DataType) no enum; None se desconhecida."""
        if isinstance(tag, cls):
            return tag
        try:
            return cls(str(tag).strip().lower())
        except ValueError:
            return None


class ValidationItem(BaseModel):
    """
    Item de uma validação em lote.
    """
    type: str = Field(..., description="Tipo do dado (ex: 'cpf', 'email', 'phone-br').")
    value: Any = Field(..., description="Valor bruto a ser validado.")
    policy: Optional[PasswordPolicy] = Field(None, description="Política de senha, usada apenas quando type='password'.")

    class Config:
        json_schema_extra = {
            "examples": [
                {"type": "cpf", "value": "111.444.777-35"},
                {"type": "password", "value": "S3nh@Forte", "policy": {"minLength": 10}},
            ]
        }
