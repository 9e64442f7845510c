from datetime import date

from fastapi import APIRouter, Depends, HTTPException

from erp.application.dtos.ponto_dto import HorasDTO, PontoRequestDTO
from erp.application.services.ponto_service import PontoService
from erp.interfaces.api.dependencies import get_ponto_service

router = APIRouter()


@router.post("/ponto/horas", response_model=HorasDTO)
def calcular_horas(
    request: PontoRequestDTO,
    service: PontoService = Depends(get_ponto_service),  # noqa: B008
) -> HorasDTO:
    try:
        return service.calcular(request, referencia=date.today())
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err
