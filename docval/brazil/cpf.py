"""
Validação de CPF (Cadastro de Pessoas Físicas).
11 dígitos, sendo os 2 últimos verificadores pelo módulo 11.
Exemplo: '123.456.789-09' é válido; '111.111.111-11' não.
"""
from docval.core.base import Mod11DocumentValidator
from docval.core.checksum import CPF_SCHEME
from docval.core.errors import ValidationVerdict

CPF_LENGTH = 11


class CPFValidator(Mod11DocumentValidator):
    document = "CPF"
    length = CPF_LENGTH
    scheme = CPF_SCHEME


cpf_validator = CPFValidator()


def validate(raw: str) -> str:
    return cpf_validator.validate(raw)


def is_valid(raw: str) -> bool:
    return cpf_validator.is_valid(raw)


def check(raw: str) -> ValidationVerdict:
    return cpf_validator.check(raw)


def compute_check_digits(payload: str) -> str:
    return cpf_validator.compute_check_digits(payload)
