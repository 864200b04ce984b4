import pytest

from docval.core.checksum import CNPJ_SCHEME, CPF_SCHEME, Mod11Scheme, check_digit, descending_weights
from docval.core.errors import DocumentValidationError, ErrorKind
from docval.utils.digits import has_all_equal_digits, normalize_digits


def test_descending_weights():
    assert descending_weights(10) == (10, 9, 8, 7, 6, 5, 4, 3, 2)
    assert CPF_SCHEME.payload_length == 9
    assert CNPJ_SCHEME.payload_length == 12


def test_check_digit_remainder_rule():
    # soma 210, resto 1 -> 0
    assert check_digit("123456789", CPF_SCHEME.first_weights) == 0
    # soma 255, resto 2 -> 9
    assert check_digit("1234567890", CPF_SCHEME.second_weights) == 9


def test_check_digit_requires_matching_weights():
    with pytest.raises(ValueError):
        check_digit("123", (3, 2))


def test_custom_scheme():
    scheme = Mod11Scheme(first_weights=(3, 2), second_weights=(4, 3, 2))
    # 1*3 + 2*2 = 7 -> 4; 1*4 + 2*3 + 4*2 = 18 -> 4
    assert scheme.compute("12") == "44"
    scheme.verify("12", "44")
    with pytest.raises(DocumentValidationError) as exc_info:
        scheme.verify("12", "45", "TESTE")
    assert exc_info.value.kind is ErrorKind.CHECKSUM_MISMATCH
    assert exc_info.value.document == "TESTE"


def test_normalize_digits():
    assert normalize_digits("123.456.789-09") == "12345678909"
    assert normalize_digits("12.345.678/0001-95", ".-/") == "12345678000195"
    assert normalize_digits("\t12 34\n") == "1234"
    with pytest.raises(DocumentValidationError) as exc_info:
        normalize_digits("12/34")
    assert exc_info.value.kind is ErrorKind.NON_DIGIT_CHARACTER


def test_has_all_equal_digits():
    assert has_all_equal_digits("11111111111")
    assert not has_all_equal_digits("11111111112")
    assert not has_all_equal_digits("")
