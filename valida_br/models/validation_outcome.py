# valida_br/models/validation_outcome.py
from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, model_validator


class ValidationOutcome(BaseModel):
    """
    Resultado estruturado de uma validação.

    Existem apenas duas variantes, garantidas na construção:
    - sucesso: `valid=True`, `normalized` preenchido, sem `errors`/`error_code`;
    - falha: `valid=False`, `errors` não vazia, sem `normalized`.

    Use as fábricas `success()` e `failure()` em vez do construtor direto.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    valid: bool
    normalized: Optional[str] = None
    errors: Optional[List[str]] = None
    error_code: Optional[str] = Field(default=None, alias="errorCode")
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_variant(self) -> "ValidationOutcome":
        if self.valid:
            if self.normalized is None:
                raise ValueError("Resultado válido exige 'normalized'.")
            if self.errors is not None or self.error_code is not None:
                raise ValueError("Resultado válido não pode conter 'errors' ou 'error_code'.")
        else:
            if not self.errors:
                raise ValueError("Resultado inválido exige ao menos um erro.")
            if self.normalized is not None:
                raise ValueError("Resultado inválido não pode conter 'normalized'.")
        return self

    @classmethod
    def success(cls, normalized: str, metadata: Optional[Dict[str, Any]] = None) -> "ValidationOutcome":
        return cls(valid=True, normalized=normalized, metadata=metadata or {})

    @classmethod
    def failure(cls, errors: Union[str, List[str]], error_code: str, metadata: Optional[Dict[str, Any]] = None) -> "ValidationOutcome":
        if isinstance(errors, str):
            errors = [errors]
        return cls(valid=False, errors=list(errors), error_code=error_code, metadata=metadata or {})

    def to_response(self) -> Dict[str, Any]:
        """Serializa com as chaves públicas (`errorCode`), omitindo campos ausentes."""
        return self.model_dump(by_alias=True, exclude_none=True)
