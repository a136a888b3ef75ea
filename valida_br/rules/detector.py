# valida_br/rules/detector.py
import logging
from typing import Any, Optional, Tuple

from valida_br.models.password_policy import DEFAULT_PASSWORD_POLICY
from valida_br.models.validation_request import DataType
from valida_br.rules.base import BaseValidator
from valida_br.rules.address.cep.validator import CEPValidator
from valida_br.rules.document.cpf_cnpj.validator import CpfValidator, CnpjValidator
from valida_br.rules.email.validator import EmailValidator
from valida_br.rules.password.validator import PasswordValidator
from valida_br.rules.phone.validator import PhoneValidator
from valida_br.rules.pessoa.nome.validator import NomeValidator
from valida_br.rules.pessoa.rg.validator import RGValidator

logger = logging.getLogger(__name__)


class TypeDetector:
    """
    Infere o tipo de um valor bruto tentando os validadores em ordem fixa
    de prioridade e devolvendo o primeiro que aceitar o valor.

    A ordem coloca os formatos numéricos antes dos textuais, e o e-mail antes
    da senha. A classificação é por prioridade, não pelo formato mais
    específico: um CPF válido que também passa como telefone é classificado
    como 'phone-br'.
    """

    def __init__(self):
        self.detection_order: Tuple[Tuple[DataType, BaseValidator], ...] = (
            (DataType.PHONE_BR, PhoneValidator()),
            (DataType.CPF, CpfValidator()),
            (DataType.CNPJ, CnpjValidator()),
            (DataType.CEP, CEPValidator()),
            (DataType.EMAIL, EmailValidator()),
            (DataType.PASSWORD, PasswordValidator()),
            (DataType.RG, RGValidator()),
            (DataType.NAME, NomeValidator()),
        )

    def detect(self, value: Any) -> Optional[DataType]:
        """
        Retorna o tipo detectado ou None quando nenhum validador aceita o valor.
        Nenhum tipo reconhecido é um resultado normal, não um erro.
        """
        if value is None or str(value) == "":
            return None

        for data_type, validator in self.detection_order:
            kwargs = {"policy": DEFAULT_PASSWORD_POLICY} if data_type is DataType.PASSWORD else {}
            if validator.validate(value, **kwargs).valid:
                logger.debug(f"Tipo detectado: {data_type.value}")
                return data_type

        logger.debug("Nenhum tipo reconhecido para o valor informado.")
        return None


_detector = TypeDetector()


def detect_type(value: Any) -> Optional[DataType]:
    return _detector.detect(value)
