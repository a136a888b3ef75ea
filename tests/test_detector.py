# tests/test_detector.py
import pytest

from valida_br.models.validation_request import DataType
from valida_br.rules.detector import TypeDetector, detect_type


@pytest.mark.parametrize("raw, expected", [
    ("11987654321", DataType.PHONE_BR),
    ("+55 (21) 3000-1234", DataType.PHONE_BR),
    ("111.444.777-35", DataType.CPF),
    ("52998224725", DataType.CPF),
    ("11.222.333/0001-81", DataType.CNPJ),
    ("01310-100", DataType.CEP),
    ("12345678", DataType.CEP),
    ("usuario@exemplo.com", DataType.EMAIL),
    ("Senha@Forte123", DataType.PASSWORD),
    ("12.345.678-9", DataType.RG),
    ("1234567", DataType.RG),
    ("Maria da Silva", DataType.NAME),
])
def test_detects_expected_type(raw, expected):
    assert detect_type(raw) is expected


@pytest.mark.parametrize("raw", ["", None, "!!!", "111.444.777-36", "@@@@"])
def test_nothing_recognized(raw):
    assert detect_type(raw) is None


def test_cpf_that_is_also_a_phone_is_classified_as_phone():
    """11987654374 é CPF válido e também celular válido (DDD 11, começa com 9)."""
    from valida_br.rules.document.cpf_cnpj.validator import validate_cpf

    assert validate_cpf("11987654374").valid is True
    assert detect_type("11987654374") is DataType.PHONE_BR


def test_detection_order_is_fixed():
    order = [data_type for data_type, _ in TypeDetector().detection_order]

    assert order == [
        DataType.PHONE_BR, DataType.CPF, DataType.CNPJ, DataType.CEP,
        DataType.EMAIL, DataType.PASSWORD, DataType.RG, DataType.NAME,
    ]


def test_email_wins_over_password():
    # Atende à política padrão de senha, mas é e-mail primeiro
    assert detect_type("Usuario1!@Exemplo.com") is DataType.EMAIL


@pytest.mark.parametrize("raw", ["11987654321", "Maria", "01310100", "xyz!"])
def test_detection_is_deterministic(raw):
    detector = TypeDetector()

    assert len({detector.detect(raw) for _ in range(5)}) == 1
