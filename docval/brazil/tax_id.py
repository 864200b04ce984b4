"""
Validador combinado de CPF ou CNPJ.

Aceita qualquer um dos dois documentos, formatado ou não, e escolhe o
validador específico pela quantidade de dígitos após a normalização:
11 para CPF e 14 para CNPJ. A escolha é por referência direta aos dois
validadores, sem tabela de registro.
"""
from docval.brazil.cnpj import CNPJ_LENGTH, CNPJValidator, cnpj_validator
from docval.brazil.cpf import CPF_LENGTH, CPFValidator, cpf_validator
from docval.core.base import CHECK_DIGITS, DocumentValidator
from docval.core.errors import DocumentValidationError, ErrorKind, ValidationVerdict


class BrazilTaxIdValidator(DocumentValidator):
    document = "CPF/CNPJ"
    separators = CNPJValidator.separators

    def __init__(self, cpf: CPFValidator = cpf_validator, cnpj: CNPJValidator = cnpj_validator):
        self.cpf = cpf
        self.cnpj = cnpj

    def _delegate(self, length: int) -> DocumentValidator:
        if length == CPF_LENGTH:
            return self.cpf
        if length == CNPJ_LENGTH:
            return self.cnpj
        raise DocumentValidationError(ErrorKind.WRONG_LENGTH, self.document)

    def check_structure(self, digits: str) -> None:
        self._delegate(len(digits)).check_structure(digits)

    def verify_checksum(self, digits: str) -> None:
        self._delegate(len(digits)).verify_checksum(digits)

    def compute_check_digits(self, payload: str) -> str:
        digits = self.normalize(payload)
        return self._delegate(len(digits) + CHECK_DIGITS).compute_check_digits(digits)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(cpf={self.cpf!r}, cnpj={self.cnpj!r})"


tax_id_validator = BrazilTaxIdValidator()


def validate(raw: str) -> str:
    return tax_id_validator.validate(raw)


def is_valid(raw: str) -> bool:
    return tax_id_validator.is_valid(raw)


def check(raw: str) -> ValidationVerdict:
    return tax_id_validator.check(raw)
