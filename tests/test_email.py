# tests/test_email.py
import pytest

from valida_br.rules.email.validator import (
    EmailValidator,
    validate_email,
    MISSING_EMAIL,
    EMAIL_TOO_LONG,
    INVALID_FORMAT,
    LOCAL_PART_TOO_LONG,
)


@pytest.fixture
def email_validator():
    return EmailValidator()


def test_valid_email_is_lowercased(email_validator):
    result = email_validator.validate("  Usuario.Teste@Empresa.COM.br ")

    assert result.valid is True
    assert result.normalized == "usuario.teste@empresa.com.br"
    assert result.metadata == {"domain": "empresa.com.br", "is_disposable": False}


def test_disposable_domain_is_flagged_but_still_valid():
    result = validate_email("alguem@Mailinator.com")

    assert result.valid is True
    assert result.metadata["is_disposable"] is True


@pytest.mark.parametrize("raw", ["", "   ", None])
def test_missing_email(raw):
    result = validate_email(raw)

    assert result.valid is False
    assert result.error_code == MISSING_EMAIL


def test_email_too_long():
    result = validate_email("a" * 250 + "@x.com")

    assert result.error_code == EMAIL_TOO_LONG


@pytest.mark.parametrize("raw", [
    "invalido",
    "usuario@",
    "@dominio.com",
    "usuario@dominio",
    "usuario@dominio.c",
    "usu ario@dominio.com",
    "a@b@c.com",
])
def test_invalid_email_format(raw):
    result = validate_email(raw)

    assert result.valid is False
    assert result.error_code == INVALID_FORMAT
    assert result.errors == ["Formato de e-mail inválido"]


def test_syntax_rejected_by_email_validator_library():
    """Passa no padrão básico, mas o domínio tem um rótulo vazio."""
    result = validate_email("usuario@dominio..com")

    assert result.valid is False
    assert result.error_code == INVALID_FORMAT


def test_local_part_too_long():
    result = validate_email("a" * 65 + "@dominio.com")

    assert result.error_code == LOCAL_PART_TOO_LONG


def test_local_part_at_limit_is_accepted():
    result = validate_email("a" * 64 + "@dominio.com")

    assert result.valid is True
