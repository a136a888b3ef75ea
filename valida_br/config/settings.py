# valida_br/config/settings.py
import os
import logging
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import ValidationError, Field

logger = logging.getLogger(__name__)

if not logger.handlers:
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=os.path.join(os.path.dirname(os.path.abspath(__file__)), '../../.env'),
        env_file_encoding='utf-8',
        extra='ignore'
    )

    APP_NAME: str = "valida-br-api"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"

    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Limite de itens por requisição de lote (o núcleo não impõe teto próprio)
    BATCH_MAX_ITEMS: int = Field(default=100, ge=1)

    # Origens permitidas para CORS, separadas por vírgula
    ALLOWED_ORIGINS: str = "http://localhost:3000"

    @property
    def ALLOWED_ORIGINS_LIST(self) -> List[str]:
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]

    LOG_LEVEL: str = "INFO"

try:
    settings = Settings()
    logging.getLogger().setLevel(settings.LOG_LEVEL)
    logger.info("Configurações carregadas com sucesso do ambiente (incluindo .env se presente).")
except ValidationError as e:
    logger.critical(f"Erro de validação nas configurações: {e.errors()}. A aplicação não pode iniciar.", exc_info=True)
    raise
except Exception as e:
    logger.critical(f"Erro inesperado ao carregar configurações: {e}. A aplicação não pode iniciar.", exc_info=True)
    raise
