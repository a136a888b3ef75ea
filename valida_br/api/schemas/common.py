# valida_br/api/schemas/common.py
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# --- Modelos de Requisição ---
class ValidateRequest(BaseModel):
    """
    Requisição de validação unitária. Sem `type`, o tipo é detectado a partir do valor.
    """
    value: Any = None  # O dado a ser validado
    type: Optional[str] = None  # Ex: "cpf", "email", "phone-br"
    policy: Optional[Dict[str, Any]] = None  # Só usada para type="password"; validada pelo serviço

    class Config:
        json_schema_extra = {
            "examples": [
                {"type": "cpf", "value": "111.444.777-35"},
                {"value": "11987654321"},
                {"type": "password", "value": "S3nh@Forte!", "policy": {"minLength": 10, "requireSymbol": True}},
            ]
        }


# --- Modelos de Resposta ---
class OutcomeFields(BaseModel):
    """Campos comuns do resultado de validação, com a chave pública `errorCode`."""
    model_config = ConfigDict(populate_by_name=True)

    valid: bool
    normalized: Optional[str] = None
    errors: Optional[List[str]] = None
    error_code: Optional[str] = Field(default=None, alias="errorCode")
    metadata: Dict[str, Any] = Field(default_factory=dict)


class ValidationResponse(OutcomeFields):
    """
    Resposta de uma validação concluída (válida ou não).
    `input` é mascarado quando o tipo é senha.
    """
    type: str
    input: str
    timestamp: datetime


class BatchItemResult(OutcomeFields):
    index: int
    type: Optional[str] = None


class BatchSummary(BaseModel):
    total: int
    valid: int
    invalid: int


class BatchValidationResponse(BaseModel):
    results: List[BatchItemResult]
    summary: BatchSummary


class DetectionResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    input: str
    detected_type: str = Field(..., alias="detectedType")


class ErrorResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    error: str
    error_code: str = Field(..., alias="errorCode")
