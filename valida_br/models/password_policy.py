# valida_br/models/password_policy.py
from pydantic import BaseModel, ConfigDict, Field


class PasswordPolicy(BaseModel):
    """
    Política de senha aplicada por chamada. Imutável.
    Aceita os nomes em snake_case ou os aliases camelCase usados na API
    (ex: `minLength`, `requireUpper`).
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    min_length: int = Field(default=8, ge=0, alias="minLength")
    max_length: int = Field(default=128, ge=0, alias="maxLength")
    require_upper: bool = Field(default=True, alias="requireUpper")
    require_lower: bool = Field(default=True, alias="requireLower")
    require_number: bool = Field(default=True, alias="requireNumber")
    require_symbol: bool = Field(default=True, alias="requireSymbol")
    forbid_common: bool = Field(default=True, alias="forbidCommon")


DEFAULT_PASSWORD_POLICY = PasswordPolicy()
