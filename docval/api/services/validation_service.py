"""
Serviço de validação: encapsula a chamada aos validadores e o mapeamento
de falhas para respostas HTTP. Facilita testes, manutenção e reuso.
"""
from typing import Dict, Any
from fastapi import HTTPException
from docval.core.base import DocumentValidator
from docval.core.errors import DocumentValidationError


class ValidationService:
    def __init__(self, logger=None):
        """
        Inicializa o serviço de validação.
        Parâmetros:
            logger (logging.Logger, opcional): Logger para logs
        """
        if logger is None:
            import logging
            logger = logging.getLogger("validation_service")
            logger.setLevel(logging.INFO)
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
            if not logger.hasHandlers():
                logger.addHandler(handler)
        self.logger = logger

    def validate_document(self, validator: DocumentValidator, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Valida o campo 'value' do payload com o validador informado.
        Parâmetros:
            validator (DocumentValidator): validador do documento
            payload (dict): corpo da requisição
        Retorno:
            dict: documento, resultado e dígitos normalizados
        """
        value = payload.get("value")
        if value is None:
            self.logger.warning(f"Payload incompleto: {payload}")
            raise HTTPException(status_code=400, detail="Campo obrigatório: value")
        if not isinstance(value, str):
            self.logger.warning(f"value não é string: value={value!r}")
            raise HTTPException(status_code=400, detail="value deve ser string")

        try:
            normalized = validator.validate(value)
        except DocumentValidationError as exc:
            # Não registra o número completo em nível warning
            self.logger.warning(f"{exc.document} inválido: code={exc.kind.value}")
            raise HTTPException(
                status_code=422,
                detail={"code": exc.kind.value, "message": str(exc), "document": exc.document},
            )

        result = {"document": validator.document, "valid": True, "normalized": normalized}
        self.logger.info(f"{validator.document} válido")
        return result
