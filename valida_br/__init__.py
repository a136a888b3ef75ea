# valida_br/__init__.py
"""
Motor de validação, normalização e detecção de tipo para dados pessoais
brasileiros: CPF, CNPJ, e-mail, senha, telefone, CEP, RG e nome.
"""
from typing import Any, List, Optional, Sequence, Union

from valida_br.models import DataType, PasswordPolicy, ValidationItem, ValidationOutcome, DEFAULT_PASSWORD_POLICY
from valida_br.rules.utils import only_digits, is_repeated_sequence
from valida_br.rules.document.cpf_cnpj.validator import validate_cpf, validate_cnpj
from valida_br.rules.email.validator import validate_email
from valida_br.rules.password.validator import validate_password
from valida_br.rules.phone.validator import validate_phone_br
from valida_br.rules.address.cep.validator import validate_cep
from valida_br.rules.pessoa.rg.validator import validate_rg
from valida_br.rules.pessoa.nome.validator import validate_name
from valida_br.rules.detector import detect_type
from valida_br.services.validation_service import ValidationService, PolicyInput

__version__ = "1.0.0"

_service = ValidationService()


def validate(data_type: Union[DataType, str], value: Any, policy: PolicyInput = None) -> ValidationOutcome:
    return _service.validate(data_type, value, policy)


def detect(value: Any) -> Optional[DataType]:
    return _service.detect(value)


def validate_batch(items: Sequence[Any]) -> List[ValidationOutcome]:
    return _service.validate_batch(items)


__all__ = [
    "DataType",
    "PasswordPolicy",
    "DEFAULT_PASSWORD_POLICY",
    "ValidationItem",
    "ValidationOutcome",
    "ValidationService",
    "only_digits",
    "is_repeated_sequence",
    "validate_cpf",
    "validate_cnpj",
    "validate_email",
    "validate_password",
    "validate_phone_br",
    "validate_cep",
    "validate_rg",
    "validate_name",
    "detect_type",
    "validate",
    "detect",
    "validate_batch",
]
