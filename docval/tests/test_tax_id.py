import pytest

from docval.brazil import tax_id
from docval.brazil.tax_id import BrazilTaxIdValidator
from docval.core.errors import DocumentValidationError, ErrorKind, ValidationVerdict


def test_valid_cpf_and_cnpj():
    assert tax_id.validate("123.456.789-09") == "12345678909"
    assert tax_id.validate("12.345.678/0001-95") == "12345678000195"


def test_invalid_length():
    with pytest.raises(DocumentValidationError) as exc_info:
        tax_id.validate("123")
    assert exc_info.value.kind is ErrorKind.WRONG_LENGTH
    assert exc_info.value.document == "CPF/CNPJ"


def test_failure_reports_delegated_document():
    with pytest.raises(DocumentValidationError) as exc_info:
        tax_id.validate("000.000.000-00")
    assert exc_info.value.kind is ErrorKind.DEGENERATE_SEQUENCE
    assert exc_info.value.document == "CPF"

    with pytest.raises(DocumentValidationError) as exc_info:
        tax_id.validate("12.345.678/0001-99")
    assert exc_info.value.kind is ErrorKind.CHECKSUM_MISMATCH
    assert exc_info.value.document == "CNPJ"


def test_invalid_characters():
    assert tax_id.check("123.abc.789-0x") == ValidationVerdict.invalid(ErrorKind.NON_DIGIT_CHARACTER)


def test_compute_check_digits():
    validator = BrazilTaxIdValidator()
    assert validator.compute_check_digits("123.456.789") == "09"
    assert validator.compute_check_digits("12.345.678/0001") == "95"
    with pytest.raises(DocumentValidationError):
        validator.compute_check_digits("1234")
