from typing import Dict, Any
from fastapi import FastAPI, status
from pydantic import BaseModel
import logging
import uvicorn
import os
from docval.api.services.validation_service import ValidationService
from docval.brazil.cnpj import cnpj_validator
from docval.brazil.cpf import cpf_validator
from docval.brazil.tax_id import tax_id_validator
from docval.integrations.pydantic_types import CNPJ, CPF

API_HOST = os.getenv("DOCVAL_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("DOCVAL_API_PORT", "3000"))
LOG_LEVEL = os.getenv("DOCVAL_LOG_LEVEL", "INFO")

logger = logging.getLogger(__name__)

app = FastAPI(title="Document Validation API", version="1.0.0")

validation_service = ValidationService()


@app.get("/")
async def root() -> dict:
    """
    Endpoint de status da API.
    Retorno:
        dict: status da API
    """
    logger.info("Endpoint / chamado, status=ok")
    return {"status": "ok"}


######### Validação por documento (prefixo /api/v1)
@app.post("/api/v1/cpf/validate")
async def validate_cpf(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Valida um CPF.
    Parâmetros:
        payload (dict): {"value": "123.456.789-09"}
    Retorno:
        dict: resultado da validação
    """
    logger.info("Recebendo pedido de validação de CPF")
    return validation_service.validate_document(cpf_validator, payload)


@app.post("/api/v1/cnpj/validate")
async def validate_cnpj(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Valida um CNPJ.
    Parâmetros:
        payload (dict): {"value": "12.345.678/0001-95"}
    Retorno:
        dict: resultado da validação
    """
    logger.info("Recebendo pedido de validação de CNPJ")
    return validation_service.validate_document(cnpj_validator, payload)


@app.post("/api/v1/tax-ids/validate")
async def validate_tax_id(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Valida um CPF ou CNPJ, escolhido pela quantidade de dígitos.
    Parâmetros:
        payload (dict): {"value": "..."}
    Retorno:
        dict: resultado da validação
    """
    logger.info("Recebendo pedido de validação de CPF/CNPJ")
    return validation_service.validate_document(tax_id_validator, payload)


######### Modelos com campos validados pelo pydantic
class Citizen(BaseModel):
    name: str
    cpf: CPF


class Company(BaseModel):
    name: str
    cnpj: CNPJ


@app.post("/api/v1/citizens", status_code=status.HTTP_200_OK)
async def check_citizen(citizen: Citizen) -> Dict[str, Any]:
    """
    Valida os dados de um cidadão; CPF inválido gera 422 do pydantic.
    Parâmetros:
        citizen (Citizen): nome e CPF
    Retorno:
        dict: dados recebidos
    """
    logger.info(f"Cidadão válido recebido: name={citizen.name}")
    return citizen.model_dump()


@app.post("/api/v1/companies", status_code=status.HTTP_200_OK)
async def check_company(company: Company) -> Dict[str, Any]:
    """
    Valida os dados de uma empresa; CNPJ inválido gera 422 do pydantic.
    Parâmetros:
        company (Company): nome e CNPJ
    Retorno:
        dict: dados recebidos
    """
    logger.info(f"Empresa válida recebida: name={company.name}")
    return company.model_dump()


if __name__ == "__main__":
    """
    Inicializa o servidor Uvicorn para rodar a API.
    """
    logging.basicConfig(level=LOG_LEVEL)
    logger.info(f"Starting Uvicorn server on {API_HOST}:{API_PORT}")
    uvicorn.run(app, host=API_HOST, port=API_PORT)
