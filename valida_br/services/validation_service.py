# valida_br/services/validation_service.py

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from valida_br.models.password_policy import PasswordPolicy
from valida_br.models.validation_outcome import ValidationOutcome
from valida_br.models.validation_request import DataType, ValidationItem
from valida_br.rules.base import BaseValidator
from valida_br.rules.detector import TypeDetector
from valida_br.rules.address.cep.validator import CEPValidator
from valida_br.rules.document.cpf_cnpj.validator import CpfValidator, CnpjValidator
from valida_br.rules.email.validator import EmailValidator
from valida_br.rules.password.validator import PasswordValidator, resolve_policy
from valida_br.rules.phone.validator import PhoneValidator
from valida_br.rules.pessoa.nome.validator import NomeValidator
from valida_br.rules.pessoa.rg.validator import RGValidator

# Códigos de erro do serviço (fora da taxonomia dos validadores)
UNSUPPORTED_TYPE = "UNSUPPORTED_TYPE"
INVALID_ITEM = "INVALID_ITEM"
MISSING_FIELDS = "MISSING_FIELDS"
INVALID_POLICY = "INVALID_POLICY"

# CONSTANTES DE MENSAGEM (para consistência)
UNSUPPORTED_TYPE_MESSAGE = "Tipo não suportado"
INVALID_ITEM_MESSAGE = "Item inválido"
MISSING_FIELDS_MESSAGE = "Tipo e valor são obrigatórios"
INVALID_POLICY_MESSAGE = "Política de senha inválida"

PolicyInput = Union[PasswordPolicy, Mapping[str, Any], None]

logger = logging.getLogger(__name__)


class ValidationService:
    """
    Ponto de entrada do motor de validação:
    - `validate`: valida um valor contra um tipo informado;
    - `detect`: infere o tipo de um valor sem tipo;
    - `validate_batch`: valida uma lista de itens independentes.

    Não guarda estado entre chamadas; uma instância pode ser compartilhada
    por todas as requisições.
    """

    def __init__(self, detector: Optional[TypeDetector] = None):
        self.detector = detector or TypeDetector()
        self.validators: Dict[DataType, BaseValidator] = {
            DataType.CPF: CpfValidator(),
            DataType.CNPJ: CnpjValidator(),
            DataType.EMAIL: EmailValidator(),
            DataType.PASSWORD: PasswordValidator(),
            DataType.PHONE_BR: PhoneValidator(),
            DataType.CEP: CEPValidator(),
            DataType.RG: RGValidator(),
            DataType.NAME: NomeValidator(),
        }
        logger.info("ValidationService inicializado com sucesso e validadores registrados.")

    def validate(self, data_type: Union[DataType, str], value: Any, policy: PolicyInput = None) -> ValidationOutcome:
        """
        Valida `value` como `data_type`. Uma tag desconhecida resulta em falha
        UNSUPPORTED_TYPE; `data_type=None` é erro de programação.

        Raises:
            TypeError: se `data_type` for None.
            pydantic.ValidationError: se `policy` for um dicionário inválido.
        """
        if data_type is None:
            raise TypeError("data_type é obrigatório para validate(); use detect() para valores sem tipo.")

        resolved_type = DataType.from_tag(data_type)
        if resolved_type is None:
            logger.warning(f"Tipo de validação '{data_type}' não suportado.")
            return ValidationOutcome.failure(UNSUPPORTED_TYPE_MESSAGE, UNSUPPORTED_TYPE)

        validator = self.validators[resolved_type]
        if resolved_type is DataType.PASSWORD:
            return validator.validate(value, policy=resolve_policy(policy))
        return validator.validate(value)

    def detect(self, value: Any) -> Optional[DataType]:
        return self.detector.detect(value)

    def validate_batch(self, items: Sequence[Any]) -> List[ValidationOutcome]:
        """
        Valida cada item de forma independente, preservando a ordem de entrada.
        Um item malformado vira uma falha no seu próprio resultado e não afeta
        os demais.
        """
        results = [self._validate_item(item) for item in items]
        valid_count = sum(1 for result in results if result.valid)
        logger.info(f"Lote processado: {len(results)} itens, {valid_count} válidos.")
        return results

    def _validate_item(self, item: Any) -> ValidationOutcome:
        if isinstance(item, ValidationItem):
            return self.validate(item.type, item.value, item.policy)

        if not isinstance(item, Mapping):
            return ValidationOutcome.failure(INVALID_ITEM_MESSAGE, INVALID_ITEM)

        data_type = item.get("type")
        value = item.get("value")
        if not data_type or value is None or value == "":
            return ValidationOutcome.failure(MISSING_FIELDS_MESSAGE, MISSING_FIELDS)

        # A política só se aplica a senhas; nos demais tipos é ignorada
        if DataType.from_tag(data_type) is not DataType.PASSWORD:
            return self.validate(data_type, value)

        try:
            policy = resolve_policy(item.get("policy"))
        except (ValidationError, TypeError, ValueError):
            logger.debug("Política de senha malformada em item do lote.")
            return ValidationOutcome.failure(INVALID_POLICY_MESSAGE, INVALID_POLICY)

        return self.validate(data_type, value, policy)
