# valida_br/api/routers/health.py

import logging
from datetime import datetime, timezone
from fastapi import APIRouter

from valida_br.api.schemas.health import HealthCheckResponse
from valida_br.config.settings import settings

logger = logging.getLogger(__name__)

# Instância do router para agrupar endpoints relacionados à saúde da aplicação
router = APIRouter()

HEALTHY_MESSAGE = "Serviço de validação operacional."

@router.get("/health", response_model=HealthCheckResponse, summary="Verificação de Saúde", tags=["Saúde"])
async def health_check() -> HealthCheckResponse:
    """
    Verifica a saúde da aplicação. O motor de validação não depende de
    serviços externos, então estar no ar é suficiente.
    """
    logger.debug("Health Check: OK.")
    return HealthCheckResponse(
        status="ok",
        message=HEALTHY_MESSAGE,
        timestamp=datetime.now(timezone.utc),
        environment=settings.ENVIRONMENT,
        version=settings.APP_VERSION,
    )
