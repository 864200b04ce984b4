"""
Cálculo de dígitos verificadores pelo módulo 11 (Receita Federal).
Os pesos de cada dígito são configurados por tipo de documento.
"""
from dataclasses import dataclass
from typing import Sequence, Tuple

from docval.core.errors import DocumentValidationError, ErrorKind

MODULUS = 11


def check_digit(digits: str, weights: Sequence[int]) -> int:
    """
    Calcula um dígito verificador.
    Parâmetros:
        digits (str): dígitos de entrada, mesmo tamanho de weights
        weights (Sequence[int]): pesos aplicados a cada dígito
    Retorno:
        int: 0 se o resto for menor que 2, senão 11 - resto
    """
    if len(digits) != len(weights):
        raise ValueError(f"esperados {len(weights)} dígitos, recebidos {len(digits)}")
    total = sum(int(d) * w for d, w in zip(digits, weights))
    remainder = total % MODULUS
    return 0 if remainder < 2 else MODULUS - remainder


@dataclass(frozen=True)
class Mod11Scheme:
    first_weights: Tuple[int, ...]
    second_weights: Tuple[int, ...]

    @property
    def payload_length(self) -> int:
        return len(self.first_weights)

    def compute(self, payload: str) -> str:
        """Deriva os dois dígitos verificadores; o segundo inclui o primeiro."""
        first = check_digit(payload, self.first_weights)
        second = check_digit(payload + str(first), self.second_weights)
        return f"{first}{second}"

    def verify(self, payload: str, check: str, document: str = "documento") -> None:
        if self.compute(payload) != check:
            raise DocumentValidationError(ErrorKind.CHECKSUM_MISMATCH, document)


def descending_weights(start: int, stop: int = 2) -> Tuple[int, ...]:
    return tuple(range(start, stop - 1, -1))


CPF_SCHEME = Mod11Scheme(
    first_weights=descending_weights(10),
    second_weights=descending_weights(11),
)

CNPJ_SCHEME = Mod11Scheme(
    first_weights=(5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2),
    second_weights=(6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2),
)
