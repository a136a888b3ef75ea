# valida_br/rules/phone/validator.py
import logging
from types import MappingProxyType
from typing import Any, Optional

import phonenumbers

from valida_br.models.validation_outcome import ValidationOutcome
from valida_br.rules.base import BaseValidator
from valida_br.rules.utils import only_digits, mask_value

# Configuração de logging
logger = logging.getLogger(__name__)

# Códigos de erro específicos para telefone
INVALID_LENGTH = "INVALID_LENGTH"
INVALID_DDD = "INVALID_DDD"
INVALID_CELL_FORMAT = "INVALID_CELL_FORMAT"

BR_COUNTRY_CODE = "55"
LANDLINE_LENGTH = 10
MOBILE_LENGTH = 11
MOBILE_PREFIX = "9"

## DDDs válidos agrupados por UF.
DDDS_POR_UF = MappingProxyType({
    "SP": frozenset({"11", "12", "13", "14", "15", "16", "17", "18", "19"}),
    "RJ": frozenset({"21", "22", "24"}),
    "ES": frozenset({"27", "28"}),
    "MG": frozenset({"31", "32", "33", "34", "35", "37", "38"}),
    "PR": frozenset({"41", "42", "43", "44", "45", "46"}),
    "SC": frozenset({"47", "48", "49"}),
    "RS": frozenset({"51", "53", "54", "55"}),
    "DF": frozenset({"61"}),
    "GO": frozenset({"62", "64"}),
    "TO": frozenset({"63"}),
    "MT": frozenset({"65", "66"}),
    "MS": frozenset({"67"}),
    "AC": frozenset({"68"}),
    "RO": frozenset({"69"}),
    "BA": frozenset({"71", "73", "74", "75", "77"}),
    "SE": frozenset({"79"}),
    "PE": frozenset({"81", "87"}),
    "AL": frozenset({"82"}),
    "PB": frozenset({"83"}),
    "RN": frozenset({"84"}),
    "CE": frozenset({"85", "88"}),
    "PI": frozenset({"86", "89"}),
    "PA": frozenset({"91", "93", "94"}),
    "AM": frozenset({"92", "97"}),
    "RR": frozenset({"95"}),
    "AP": frozenset({"96"}),
    "MA": frozenset({"98", "99"}),
})

# Índice inverso DDD -> UF para buscas O(1)
UF_POR_DDD = MappingProxyType({ddd: uf for uf, ddds in DDDS_POR_UF.items() for ddd in ddds})
DDD_VALIDOS_BR = frozenset(UF_POR_DDD)


def uf_for_ddd(ddd: str) -> Optional[str]:
    return UF_POR_DDD.get(ddd)


class PhoneValidator(BaseValidator):
    """
    Validador de telefones brasileiros (fixo e celular).

    Verificações, na ordem e com parada na primeira falha:
    comprimento (10 fixo / 11 celular, após remover o prefixo 55),
    DDD na lista de DDDs válidos e o nono dígito dos celulares.
    """
    def __init__(self):
        super().__init__(origin_name="phone_validator")

    def _strip_country_code(self, digits: str) -> str:
        if digits.startswith(BR_COUNTRY_CODE):
            return digits[len(BR_COUNTRY_CODE):]
        return digits

    @staticmethod
    def _to_e164(local_number: str) -> str:
        parsed = phonenumbers.PhoneNumber(country_code=int(BR_COUNTRY_CODE), national_number=int(local_number))
        return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)

    def validate(self, data: Any, **kwargs) -> ValidationOutcome:
        local = self._strip_country_code(only_digits(data))
        logger.debug(f"Iniciando validação de telefone: {mask_value(local, visible=2)}")

        if len(local) not in (LANDLINE_LENGTH, MOBILE_LENGTH):
            return self._failure("Telefone deve ter 10 (fixo) ou 11 dígitos (celular)", INVALID_LENGTH)

        ddd = local[:2]
        if ddd not in DDD_VALIDOS_BR:
            return self._failure("DDD inválido", INVALID_DDD)

        is_mobile = len(local) == MOBILE_LENGTH
        if is_mobile and local[2] != MOBILE_PREFIX:
            return self._failure("Celular deve iniciar com 9", INVALID_CELL_FORMAT)

        subscriber = local[2:]
        split_at = 5 if is_mobile else 4
        normalized = f"+55 ({ddd}) {subscriber[:split_at]}-{subscriber[split_at:]}"

        return self._success(
            normalized=normalized,
            metadata={
                "type": "mobile" if is_mobile else "landline",
                "ddd": ddd,
                "state": uf_for_ddd(ddd),
                "e164": self._to_e164(local),
            },
        )


_phone_validator = PhoneValidator()


def validate_phone_br(raw: Any) -> ValidationOutcome:
    return _phone_validator.validate(raw)
