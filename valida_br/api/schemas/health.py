# valida_br/api/schemas/health.py

from pydantic import BaseModel, Field
from datetime import datetime

class HealthCheckResponse(BaseModel):
    """
    Schema de resposta para o endpoint de verificação de saúde da API.
    """
    status: str = Field(..., description="Status geral da aplicação ('ok').")
    message: str = Field(..., description="Mensagem descritiva do status da aplicação.")
    timestamp: datetime = Field(..., description="Timestamp da verificação de saúde.")
    environment: str = Field(..., description="Ambiente de execução (ex: 'development', 'production').")
    version: str = Field(..., description="Versão da API.")

    class Config:
        json_schema_extra = {
            "example": {
                "status": "ok",
                "message": "Serviço de validação operacional.",
                "timestamp": "2024-06-24T10:30:00Z",
                "environment": "development",
                "version": "1.0.0"
            }
        }
