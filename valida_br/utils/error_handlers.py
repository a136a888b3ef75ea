# valida_br/utils/error_handlers.py
import logging
from datetime import datetime, timezone
from typing import NoReturn

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "INTERNAL_ERROR"
NOT_FOUND = "NOT_FOUND"
HTTP_ERROR = "HTTP_ERROR"
INVALID_REQUEST = "INVALID_REQUEST"

INTERNAL_ERROR_MESSAGE = "Erro interno do servidor"
NOT_FOUND_MESSAGE = "Endpoint não encontrado"
INVALID_REQUEST_MESSAGE = "Corpo da requisição inválido"


def raise_api_error(status_code: int, message: str, error_code: str) -> NoReturn:
    """
    Levanta uma HTTPException com o corpo padronizado `{error, errorCode}`.
    Usada para erros do chamador (parâmetro ausente, tipo não reconhecido, lote grande demais).
    """
    logger.warning(f"Erro do chamador: [Código: {status_code}] - {error_code}: {message}")
    raise HTTPException(status_code=status_code, detail={"error": message, "errorCode": error_code})


def register_exception_handlers(app: FastAPI) -> None:
    """Registra os handlers que convertem exceções em respostas JSON padronizadas."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if isinstance(exc.detail, dict):
            content = exc.detail
        elif exc.status_code == status.HTTP_404_NOT_FOUND:
            content = {"error": NOT_FOUND_MESSAGE, "errorCode": NOT_FOUND, "path": request.url.path}
        else:
            content = {"error": str(exc.detail), "errorCode": HTTP_ERROR}
        return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Erro inesperado em {request.method} {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": INTERNAL_ERROR_MESSAGE,
                "errorCode": INTERNAL_ERROR,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Corpo fora do formato esperado (ex: objeto no lugar de lista) é erro do chamador
        locations = [".".join(str(part) for part in error.get("loc", ())) for error in exc.errors()]
        logger.warning(f"Requisição inválida em {request.method} {request.url.path}: {locations}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": INVALID_REQUEST_MESSAGE, "errorCode": INVALID_REQUEST},
        )
