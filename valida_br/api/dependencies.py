# valida_br/api/dependencies.py
import logging

from valida_br.services.validation_service import ValidationService

logger = logging.getLogger(__name__)

# O serviço não guarda estado entre requisições, então uma única instância
# é criada na importação e compartilhada por todos os endpoints.
global_validation_service = ValidationService()


def get_validation_service() -> ValidationService:
    """Dependência FastAPI que fornece o ValidationService."""
    return global_validation_service
