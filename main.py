# main.py
import uvicorn
import logging

from valida_br.config.settings import settings

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    logger.info(f"Iniciando o servidor FastAPI...")
    logger.info(f"Acesse a API em: http://127.0.0.1:{settings.PORT}")
    logger.info(f"Documentação da API (Swagger UI): http://127.0.0.1:{settings.PORT}/docs")
    logger.info(f"APERTAR CTRL+C PARA SAIR DO SERVIÇO...")

    uvicorn.run(
        "valida_br.api.api_main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
    )
