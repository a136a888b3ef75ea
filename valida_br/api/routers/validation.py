# valida_br/api/routers/validation.py
import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query, Request, status
from pydantic import ValidationError

from valida_br.api.dependencies import get_validation_service
from valida_br.api.schemas.common import (
    BatchItemResult,
    BatchSummary,
    BatchValidationResponse,
    DetectionResult,
    ErrorResponse,
    ValidateRequest,
    ValidationResponse,
)
from valida_br.config.settings import settings
from valida_br.models.validation_request import DataType
from valida_br.rules.password.validator import MASK_TOKEN
from valida_br.services.validation_service import ValidationService, PolicyInput
from valida_br.utils.error_handlers import raise_api_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["Validation"])

# Parâmetros de query aceitos como política de senha no GET /validate
POLICY_QUERY_PARAMS = (
    "minLength", "maxLength", "requireUpper", "requireLower",
    "requireNumber", "requireSymbol", "forbidCommon",
)

NO_TYPE_DETECTED = "none"

CALLER_ERROR_RESPONSES = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


def _display_input(data_type: Optional[DataType], value: Any) -> str:
    return MASK_TOKEN if data_type is DataType.PASSWORD else str(value)


def _run_validation(service: ValidationService, value: Any, type_tag: Optional[str], policy: PolicyInput) -> ValidationResponse:
    """
    Fluxo comum do GET e do POST: tipo informado ou detectado, validação e
    montagem da resposta. Erros do chamador viram 400.
    """
    if value is None or str(value) == "":
        raise_api_error(status.HTTP_400_BAD_REQUEST, 'Parâmetro "value" é obrigatório', "MISSING_VALUE")

    if type_tag:
        data_type = DataType.from_tag(type_tag)
        if data_type is None:
            raise_api_error(status.HTTP_400_BAD_REQUEST, "Tipo não suportado", "UNSUPPORTED_TYPE")
    else:
        data_type = service.detect(value)
        if data_type is None:
            raise_api_error(status.HTTP_400_BAD_REQUEST, "Tipo de dado não reconhecido", "UNRECOGNIZED_TYPE")

    try:
        outcome = service.validate(data_type, value, policy)
    except ValidationError:
        raise_api_error(status.HTTP_400_BAD_REQUEST, "Política de senha inválida", "INVALID_POLICY")

    logger.info(f"Validação de '{data_type.value}' concluída: válido={outcome.valid}")
    return ValidationResponse(
        type=data_type.value,
        input=_display_input(data_type, value),
        timestamp=datetime.now(timezone.utc),
        **outcome.model_dump(),
    )


@router.get(
    "/validate",
    response_model=ValidationResponse,
    response_model_exclude_none=True,
    responses=CALLER_ERROR_RESPONSES,
    summary="Valida um valor (tipo informado ou detectado)",
    description="Valida `value` como `type`. Sem `type`, o tipo é detectado pelo valor. Parâmetros de política de senha (`minLength`, `requireUpper`, ...) podem ser passados na query.",
)
async def validate_get_endpoint(
    request: Request,
    value: Optional[str] = Query(None, description="Valor bruto a validar."),
    type: Optional[str] = Query(None, description="Tipo do dado (cpf, cnpj, email, password, phone-br, cep, rg, name)."),
    validation_service: ValidationService = Depends(get_validation_service),
):
    policy: Optional[Dict[str, str]] = {
        key: val for key, val in request.query_params.items() if key in POLICY_QUERY_PARAMS
    } or None
    return _run_validation(validation_service, value, type, policy)


@router.post(
    "/validate",
    response_model=ValidationResponse,
    response_model_exclude_none=True,
    responses=CALLER_ERROR_RESPONSES,
    summary="Valida um valor enviado no corpo da requisição",
)
async def validate_post_endpoint(
    request_data: ValidateRequest = Body(...),
    validation_service: ValidationService = Depends(get_validation_service),
):
    return _run_validation(validation_service, request_data.value, request_data.type, request_data.policy)


@router.post(
    "/validate/batch",
    response_model=BatchValidationResponse,
    response_model_exclude_none=True,
    responses=CALLER_ERROR_RESPONSES,
    summary="Valida uma lista de itens {type, value, policy?}",
    description="Cada item é validado de forma independente; a ordem dos resultados segue a ordem de entrada.",
)
async def validate_batch_endpoint(
    items: List[Any] = Body(...),
    validation_service: ValidationService = Depends(get_validation_service),
):
    if len(items) > settings.BATCH_MAX_ITEMS:
        raise_api_error(
            status.HTTP_400_BAD_REQUEST,
            f"Máximo de {settings.BATCH_MAX_ITEMS} itens por requisição",
            "BATCH_LIMIT_EXCEEDED",
        )

    outcomes = validation_service.validate_batch(items)
    results = [
        BatchItemResult(
            index=index,
            type=str(item["type"]) if isinstance(item, Mapping) and item.get("type") else None,
            **outcome.model_dump(),
        )
        for index, (item, outcome) in enumerate(zip(items, outcomes))
    ]
    valid_count = sum(1 for result in results if result.valid)
    return BatchValidationResponse(
        results=results,
        summary=BatchSummary(total=len(results), valid=valid_count, invalid=len(results) - valid_count),
    )


@router.post(
    "/detect",
    response_model=List[DetectionResult],
    summary="Detecta o tipo de cada valor de uma lista",
)
async def detect_endpoint(
    values: List[Any] = Body(...),
    validation_service: ValidationService = Depends(get_validation_service),
):
    results = []
    for value in values:
        data_type = validation_service.detect(value)
        results.append(DetectionResult(
            input=_display_input(data_type, "" if value is None else value),
            detected_type=data_type.value if data_type else NO_TYPE_DETECTED,
        ))
    return results
