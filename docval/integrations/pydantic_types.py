"""
Integração opcional com pydantic (extra 'pydantic').

Expõe os validadores de documentos na convenção de validadores customizados
do pydantic v2: uma função que recebe o valor do campo e devolve o próprio
valor, ou levanta PydanticCustomError. O tipo do erro é o código do
ErrorKind ('checksum_mismatch', 'wrong_length', ...).

Uso:
    class Citizen(BaseModel):
        cpf: CPF
"""
from typing import Annotated, Callable

from pydantic import AfterValidator
from pydantic_core import PydanticCustomError

from docval.brazil.cnpj import cnpj_validator
from docval.brazil.cpf import cpf_validator
from docval.brazil.tax_id import tax_id_validator
from docval.core.base import DocumentValidator
from docval.core.errors import DocumentValidationError


def as_field_validator(validator: DocumentValidator) -> Callable[[str], str]:
    """
    Adapta um DocumentValidator para um validador de campo do pydantic.
    Parâmetros:
        validator (DocumentValidator): validador do documento
    Retorno:
        Callable[[str], str]: função para AfterValidator / field_validator
    """

    def _validate(value: str) -> str:
        try:
            validator.validate(value)
        except DocumentValidationError as exc:
            raise PydanticCustomError(
                exc.kind.value,
                "{document} inválido: {reason}",
                {"document": exc.document, "reason": exc.kind.message},
            ) from exc
        return value

    _validate.__name__ = f"validate_{type(validator).__name__}"
    return _validate


CPF = Annotated[str, AfterValidator(as_field_validator(cpf_validator))]
CNPJ = Annotated[str, AfterValidator(as_field_validator(cnpj_validator))]
BrazilTaxId = Annotated[str, AfterValidator(as_field_validator(tax_id_validator))]
