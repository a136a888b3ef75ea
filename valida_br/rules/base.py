# valida_br/rules/base.py
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Union

from valida_br.models.validation_outcome import ValidationOutcome

logger = logging.getLogger(__name__)


class BaseValidator(ABC):
    """
    Classe base abstrata para todos os validadores de dados.
    Define a interface comum para métodos de validação.

    Validadores são puros e síncronos: não fazem I/O e não guardam estado
    entre chamadas, então uma mesma instância pode ser usada por várias
    threads ao mesmo tempo.
    """
    def __init__(self, origin_name: str):
        # O nome da origem do validador (ex: "phone_validator", "email_validator")
        self.origin_name = origin_name

    @abstractmethod
    def validate(self, data: Any, **kwargs) -> ValidationOutcome:
        """
        Método abstrato para validar um dado específico.

        Args:
            data (Any): O dado bruto a ser validado (pode ser None).
            **kwargs: Argumentos adicionais específicos da validação (ex: policy).

        Returns:
            ValidationOutcome: resultado de sucesso ou de falha.
        """
        pass

    @staticmethod
    def _as_text(data: Any) -> str:
        """Converte a entrada bruta em string; None vira string vazia."""
        return "" if data is None else str(data)

    def _success(self, normalized: str, metadata: Optional[Dict[str, Any]] = None) -> ValidationOutcome:
        logger.debug(f"{self.origin_name}: validação concluída com sucesso.")
        return ValidationOutcome.success(normalized=normalized, metadata=metadata)

    def _failure(self, errors: Union[str, List[str]], error_code: str) -> ValidationOutcome:
        logger.debug(f"{self.origin_name}: validação falhou ({error_code}).")
        return ValidationOutcome.failure(errors=errors, error_code=error_code)
