"""
Módulo utilitário para normalização de números de documentos.
Funções reutilizáveis e testáveis, sem estado.
"""
import re
from typing import Iterable

from docval.core.errors import DocumentValidationError, ErrorKind

ASCII_DIGITS = frozenset("0123456789")
DEFAULT_SEPARATORS = ".-"


def _separator_pattern(separators: Iterable[str]) -> "re.Pattern[str]":
    return re.compile("[\\s" + re.escape("".join(separators)) + "]")


def normalize_digits(raw: str, separators: str = DEFAULT_SEPARATORS, document: str = "documento") -> str:
    """
    Remove caracteres de formatação e garante que sobraram apenas dígitos ASCII.
    Parâmetros:
        raw (str): número em qualquer formato
        separators (str): caracteres de formatação aceitos, além de espaços
        document (str): nome do documento, usado na mensagem de erro
    Retorno:
        str: apenas dígitos
    Exemplo: '123.456.789-09' -> '12345678909'
    """
    if not isinstance(raw, str):
        raise TypeError(f"{document} deve ser str, recebido {type(raw).__name__}")
    digits = _separator_pattern(separators).sub("", raw)
    # str.isdigit aceita dígitos Unicode; somente 0-9 ASCII são válidos
    if not set(digits) <= ASCII_DIGITS:
        raise DocumentValidationError(ErrorKind.NON_DIGIT_CHARACTER, document)
    return digits


def has_all_equal_digits(digits: str) -> bool:
    return bool(digits) and digits == digits[0] * len(digits)
