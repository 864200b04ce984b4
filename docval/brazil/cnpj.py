"""
Validação de CNPJ (Cadastro Nacional da Pessoa Jurídica).
14 dígitos; aceita a formatação '12.345.678/0001-95'.
"""
from docval.core.base import Mod11DocumentValidator
from docval.core.checksum import CNPJ_SCHEME
from docval.core.errors import ValidationVerdict

CNPJ_LENGTH = 14


class CNPJValidator(Mod11DocumentValidator):
    document = "CNPJ"
    length = CNPJ_LENGTH
    scheme = CNPJ_SCHEME
    separators = ".-/"


cnpj_validator = CNPJValidator()


def validate(raw: str) -> str:
    return cnpj_validator.validate(raw)


def is_valid(raw: str) -> bool:
    return cnpj_validator.is_valid(raw)


def check(raw: str) -> ValidationVerdict:
    return cnpj_validator.check(raw)


def compute_check_digits(payload: str) -> str:
    return cnpj_validator.compute_check_digits(payload)
