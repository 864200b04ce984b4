"""
Contrato comum dos validadores de documentos.

Cada tipo de documento (CPF, CNPJ, ...) é uma subclasse de DocumentValidator.
A validação roda em ordem: normalização, estrutura e dígitos verificadores,
parando na primeira falha. Documentos de tamanho fixo com dígitos
verificadores pelo módulo 11 herdam de Mod11DocumentValidator e só definem
nome, tamanho, caracteres de formatação e esquema de pesos.

Os validadores não guardam estado entre chamadas e podem ser usados por
várias threads ao mesmo tempo.
"""
from abc import ABC, abstractmethod

from docval.core.checksum import Mod11Scheme
from docval.core.errors import DocumentValidationError, ErrorKind, ValidationVerdict
from docval.utils.digits import DEFAULT_SEPARATORS, has_all_equal_digits, normalize_digits

CHECK_DIGITS = 2


class DocumentValidator(ABC):
    separators: str = DEFAULT_SEPARATORS

    @property
    @abstractmethod
    def document(self) -> str:
        """Nome do documento usado nas mensagens de erro (ex.: 'CPF')."""

    @abstractmethod
    def check_structure(self, digits: str) -> None:
        pass

    @abstractmethod
    def verify_checksum(self, digits: str) -> None:
        pass

    @abstractmethod
    def compute_check_digits(self, payload: str) -> str:
        pass

    def normalize(self, raw: str) -> str:
        return normalize_digits(raw, self.separators, self.document)

    def validate(self, raw: str) -> str:
        """
        Valida o documento e devolve seus dígitos normalizados.
        Parâmetros:
            raw (str): documento em qualquer formato
        Retorno:
            str: documento apenas com dígitos
        Exceções:
            DocumentValidationError: com o motivo da primeira falha
        """
        digits = self.normalize(raw)
        self.check_structure(digits)
        self.verify_checksum(digits)
        return digits

    def is_valid(self, raw: str) -> bool:
        try:
            self.validate(raw)
        except DocumentValidationError:
            return False
        return True

    def check(self, raw: str) -> ValidationVerdict:
        try:
            self.validate(raw)
        except DocumentValidationError as exc:
            return ValidationVerdict.invalid(exc.kind)
        return ValidationVerdict.ok()


class Mod11DocumentValidator(DocumentValidator):
    @property
    @abstractmethod
    def length(self) -> int:
        pass

    @property
    @abstractmethod
    def scheme(self) -> Mod11Scheme:
        pass

    def check_structure(self, digits: str) -> None:
        """
        Verifica tamanho e rejeita sequências de dígitos iguais.
        Parâmetros:
            digits (str): documento já normalizado
        Retorno: None
        """
        if len(digits) != self.length:
            raise DocumentValidationError(ErrorKind.WRONG_LENGTH, self.document)
        # Sequências repetidas podem passar no módulo 11, mas não são emitidas
        if has_all_equal_digits(digits):
            raise DocumentValidationError(ErrorKind.DEGENERATE_SEQUENCE, self.document)

    def verify_checksum(self, digits: str) -> None:
        payload, check = digits[:-CHECK_DIGITS], digits[-CHECK_DIGITS:]
        self.scheme.verify(payload, check, self.document)

    def compute_check_digits(self, payload: str) -> str:
        """
        Calcula os dígitos verificadores de um payload.
        Parâmetros:
            payload (str): dígitos sem os verificadores (formatação aceita)
        Retorno:
            str: os dois dígitos verificadores
        """
        digits = self.normalize(payload)
        if len(digits) != self.length - CHECK_DIGITS:
            raise DocumentValidationError(ErrorKind.WRONG_LENGTH, self.document)
        return self.scheme.compute(digits)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(document={self.document!r}, length={self.length})"
