# valida_br/api/api_main.py
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from valida_br.config.settings import settings
from valida_br.utils.error_handlers import register_exception_handlers
from .routers import health
from .routers import validation

# Configuração de logging.
logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

# Cabeçalhos de segurança aplicados a todas as respostas
SECURITY_HEADERS = {
    "Content-Security-Policy": "default-src 'self'; style-src 'self' 'unsafe-inline'; script-src 'self'",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
}

# Rotas de documentação carregam scripts externos e não recebem a CSP
DOCS_PATHS = ("/docs", "/redoc", "/openapi.json")

# --- Inicializa o aplicativo FastAPI ---
app = FastAPI(
    title="valida-br API",
    description="Valida, normaliza e detecta o tipo de dados pessoais brasileiros: CPF, CNPJ, e-mail, senha, telefone, CEP, RG e nome.",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS_LIST,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(validation.router)
app.include_router(health.router)
register_exception_handlers(app)


@app.on_event("startup")
async def startup_event():
    logger.info(f"Iniciando {settings.APP_NAME} v{settings.APP_VERSION} (ambiente: {settings.ENVIRONMENT}).")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutdown da aplicação concluído.")


@app.middleware("http")
async def request_logging_middleware(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000

    for header, value in SECURITY_HEADERS.items():
        if header == "Content-Security-Policy" and request.url.path.startswith(DOCS_PATHS):
            continue
        response.headers.setdefault(header, value)

    # Query string fica fora do log: pode conter dados pessoais ou senha
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
    return response
