from fastapi import APIRouter, Depends, HTTPException

from erp.application.dtos.rateio_dto import (
    CotaSugeridaDTO,
    RateioDTO,
    RateioIgualitarioRequestDTO,
    RateioRequestDTO,
)
from erp.application.services.rateio_service import RateioService
from erp.interfaces.api.dependencies import get_rateio_service

router = APIRouter()


@router.post("/rateio", response_model=RateioDTO)
def ratear(
    request: RateioRequestDTO,
    service: RateioService = Depends(get_rateio_service),  # noqa: B008
) -> RateioDTO:
    try:
        resultado = service.ratear(request)
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err

    if resultado.erro is not None:
        raise HTTPException(status_code=422, detail=resultado.erro.mensagem)
    return resultado.desembrulhar()


@router.post("/rateio/igualitario", response_model=list[CotaSugeridaDTO])
def sugerir_igualitario(
    request: RateioIgualitarioRequestDTO,
    service: RateioService = Depends(get_rateio_service),  # noqa: B008
) -> list[CotaSugeridaDTO]:
    return service.sugerir_igualitario(request)
