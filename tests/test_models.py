# tests/test_models.py
import pytest
from pydantic import ValidationError

from valida_br.models.validation_outcome import ValidationOutcome
from valida_br.models.validation_request import DataType


def test_success_factory():
    outcome = ValidationOutcome.success("01310-100", {"region": "SP"})

    assert outcome.valid is True
    assert outcome.errors is None
    assert outcome.to_response() == {"valid": True, "normalized": "01310-100", "metadata": {"region": "SP"}}


def test_failure_factory_accepts_single_message():
    outcome = ValidationOutcome.failure("CEP deve ter 8 dígitos", "INVALID_LENGTH")

    assert outcome.errors == ["CEP deve ter 8 dígitos"]
    assert outcome.to_response() == {
        "valid": False,
        "errors": ["CEP deve ter 8 dígitos"],
        "errorCode": "INVALID_LENGTH",
        "metadata": {},
    }


@pytest.mark.parametrize("kwargs", [
    {"valid": True},
    {"valid": True, "normalized": "x", "errors": ["erro"]},
    {"valid": True, "normalized": "x", "error_code": "INVALID_LENGTH"},
    {"valid": False},
    {"valid": False, "errors": []},
    {"valid": False, "errors": ["erro"], "normalized": "x"},
])
def test_outcome_variants_are_mutually_exclusive(kwargs):
    with pytest.raises(ValidationError):
        ValidationOutcome(**kwargs)


def test_outcome_accepts_public_alias():
    outcome = ValidationOutcome(valid=False, errors=["erro"], errorCode="INVALID_FORMAT")

    assert outcome.error_code == "INVALID_FORMAT"


@pytest.mark.parametrize("tag, expected", [
    ("cpf", DataType.CPF),
    (" Phone-BR ", DataType.PHONE_BR),
    (DataType.NAME, DataType.NAME),
    ("passaporte", None),
    (None, None),
])
def test_data_type_from_tag(tag, expected):
    assert DataType.from_tag(tag) is expected
