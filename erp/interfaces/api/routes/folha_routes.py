from decimal import Decimal

from fastapi import APIRouter, Depends, Query

from erp.application.dtos.folha_dto import HoleriteDTO, ImpostoDTO, SalarioRequestDTO
from erp.application.dtos.limites import VALOR_MAXIMO
from erp.application.services.folha_service import FolhaService
from erp.interfaces.api.dependencies import get_folha_service

router = APIRouter()


@router.get("/folha/inss", response_model=ImpostoDTO)
def get_inss(
    salario: Decimal = Query(ge=0, le=VALOR_MAXIMO),  # noqa: B008
    service: FolhaService = Depends(get_folha_service),  # noqa: B008
) -> ImpostoDTO:
    return service.inss(salario)


@router.get("/folha/irpf", response_model=ImpostoDTO)
def get_irpf(
    salario: Decimal = Query(ge=0, le=VALOR_MAXIMO),  # noqa: B008
    dependentes: int = Query(default=0, ge=0),
    service: FolhaService = Depends(get_folha_service),  # noqa: B008
) -> ImpostoDTO:
    return service.irpf(salario, dependentes)


@router.post("/folha/salario-liquido", response_model=HoleriteDTO)
def calcular_holerite(
    request: SalarioRequestDTO,
    service: FolhaService = Depends(get_folha_service),  # noqa: B008
) -> HoleriteDTO:
    return service.holerite(request)
