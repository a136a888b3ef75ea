# tests/test_validation_service.py
import pytest

import valida_br
from valida_br.models.password_policy import PasswordPolicy
from valida_br.models.validation_request import DataType, ValidationItem
from valida_br.services.validation_service import (
    UNSUPPORTED_TYPE,
    INVALID_ITEM,
    MISSING_FIELDS,
    INVALID_POLICY,
)


@pytest.mark.parametrize("data_type, value, normalized", [
    (DataType.CPF, "111.444.777-35", "111.444.777-35"),
    ("cnpj", "11222333000181", "11.222.333/0001-81"),
    ("phone-br", "11987654321", "+55 (11) 98765-4321"),
    ("cep", "01310100", "01310-100"),
    ("email", "Contato@Exemplo.com", "contato@exemplo.com"),
    ("rg", "12.345.678-9", "123456789"),
    ("name", "Ana  Maria", "Ana Maria"),
    ("password", "Senha@Forte123", "***"),
])
def test_validate_dispatches_to_the_right_validator(validation_service, data_type, value, normalized):
    result = validation_service.validate(data_type, value)

    assert result.valid is True
    assert result.normalized == normalized


def test_unknown_type_is_a_structured_failure(validation_service):
    result = validation_service.validate("passaporte", "AB123456")

    assert result.valid is False
    assert result.error_code == UNSUPPORTED_TYPE


def test_none_type_is_a_programming_error(validation_service):
    with pytest.raises(TypeError):
        validation_service.validate(None, "111.444.777-35")


def test_password_policy_is_forwarded(validation_service, open_policy):
    assert validation_service.validate("password", "abc").valid is False
    assert validation_service.validate("password", "abc", open_policy).valid is True
    assert validation_service.validate("password", "abc", {"minLength": 3, "requireUpper": False,
                                                           "requireNumber": False, "requireSymbol": False}).valid is True


def test_detect(validation_service):
    assert validation_service.detect("01310-100") is DataType.CEP
    assert validation_service.detect("???") is None


def test_batch_preserves_order_and_isolates_items(validation_service):
    items = [
        {"type": "cpf", "value": "111.444.777-35"},
        "nao sou um objeto",
        {"type": "cpf"},
        {"type": "cnpj", "value": "11.222.333/0001-82"},
        {"type": "password", "value": "abc", "policy": {"minLength": "muitos"}},
        {"type": "foo", "value": "bar"},
        ValidationItem(type="password", value="abc", policy=PasswordPolicy(min_length=3, require_upper=False,
                                                                          require_number=False, require_symbol=False)),
        {"type": "cep", "value": "01310100"},
    ]

    results = validation_service.validate_batch(items)

    assert [r.valid for r in results] == [True, False, False, False, False, False, True, True]
    assert [r.error_code for r in results] == [
        None, INVALID_ITEM, MISSING_FIELDS, "INVALID_CHECK_DIGIT", INVALID_POLICY, UNSUPPORTED_TYPE, None, None,
    ]


def test_batch_ignores_policy_on_non_password_items(validation_service):
    items = [
        {"type": "cpf", "value": "11144477735", "policy": "x"},
        {"type": "email", "value": "contato@exemplo.com", "policy": {"minLength": -5}},
        {"type": "password", "value": "abc", "policy": "x"},
    ]

    results = validation_service.validate_batch(items)

    assert [r.valid for r in results] == [True, True, False]
    assert results[0].normalized == "111.444.777-35"
    assert results[2].error_code == INVALID_POLICY


def test_empty_batch(validation_service):
    assert validation_service.validate_batch([]) == []


def test_package_level_api():
    assert valida_br.validate("cpf", "111.444.777-35").valid is True
    assert valida_br.detect("11.222.333/0001-81") is DataType.CNPJ
    assert len(valida_br.validate_batch([{"type": "rg", "value": "1234567"}] * 3)) == 3
    assert valida_br.validate_phone_br("11987654321").normalized == "+55 (11) 98765-4321"
