# tests/conftest.py
import httpx
import pytest
import pytest_asyncio

from valida_br.api.api_main import app
from valida_br.models.password_policy import PasswordPolicy
from valida_br.services.validation_service import ValidationService


@pytest.fixture
def validation_service():
    return ValidationService()


@pytest.fixture
def open_policy():
    """Política com todos os requisitos desligados."""
    return PasswordPolicy(
        min_length=0,
        max_length=1000,
        require_upper=False,
        require_lower=False,
        require_number=False,
        require_symbol=False,
        forbid_common=False,
    )


@pytest_asyncio.fixture
async def api_client():
    """Cliente HTTP ligado diretamente à aplicação ASGI, sem subir servidor."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
