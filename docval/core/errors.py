"""
Erros e veredito de validação de documentos.
Conjunto fechado de motivos de falha, um por etapa da validação.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    WRONG_LENGTH = "wrong_length"
    NON_DIGIT_CHARACTER = "non_digit_character"
    DEGENERATE_SEQUENCE = "degenerate_sequence"
    CHECKSUM_MISMATCH = "checksum_mismatch"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ErrorKind.WRONG_LENGTH: "quantidade de dígitos inválida",
    ErrorKind.NON_DIGIT_CHARACTER: "contém caracteres que não são dígitos",
    ErrorKind.DEGENERATE_SEQUENCE: "todos os dígitos são iguais",
    ErrorKind.CHECKSUM_MISMATCH: "dígitos verificadores não conferem",
}


class DocumentValidationError(ValueError):
    """
    Falha de validação de um documento.
    Parâmetros:
        kind (ErrorKind): motivo da falha
        document (str): tipo do documento (ex.: 'CPF')
    """

    def __init__(self, kind: ErrorKind, document: str = "documento"):
        self.kind = kind
        self.document = document
        super().__init__(f"{document} inválido: {kind.message}")

    def __reduce__(self):
        return type(self), (self.kind, self.document)


@dataclass(frozen=True)
class ValidationVerdict:
    valid: bool
    error: Optional[ErrorKind] = None

    def __post_init__(self):
        if self.valid != (self.error is None):
            raise ValueError("veredito válido não tem erro; inválido exige um ErrorKind")

    @classmethod
    def ok(cls) -> "ValidationVerdict":
        return cls(valid=True)

    @classmethod
    def invalid(cls, kind: ErrorKind) -> "ValidationVerdict":
        return cls(valid=False, error=kind)

    @property
    def message(self) -> Optional[str]:
        return self.error.message if self.error is not None else None
