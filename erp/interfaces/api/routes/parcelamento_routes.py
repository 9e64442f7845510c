from fastapi import APIRouter, Depends, HTTPException

from erp.application.dtos.parcelamento_dto import (
    ParcelamentoDTO,
    ParcelamentoMensalRequestDTO,
    ParcelasPersonalizadasRequestDTO,
    SituacaoDTO,
    SituacaoRequestDTO,
)
from erp.application.services.parcelamento_service import ParcelamentoService
from erp.interfaces.api.dependencies import get_parcelamento_service

router = APIRouter()


@router.post("/parcelas/mensais", response_model=ParcelamentoDTO)
def gerar_mensais(
    request: ParcelamentoMensalRequestDTO,
    service: ParcelamentoService = Depends(get_parcelamento_service),  # noqa: B008
) -> ParcelamentoDTO:
    try:
        return service.gerar_mensais(request)
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err


@router.post("/parcelas/personalizadas", response_model=ParcelamentoDTO)
def conferir_personalizadas(
    request: ParcelasPersonalizadasRequestDTO,
    service: ParcelamentoService = Depends(get_parcelamento_service),  # noqa: B008
) -> ParcelamentoDTO:
    try:
        resultado = service.conferir_personalizadas(request)
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err

    if resultado.erro is not None:
        raise HTTPException(status_code=422, detail=resultado.erro.mensagem)
    return resultado.desembrulhar()


@router.post("/parcelas/situacao", response_model=SituacaoDTO)
def situacao(
    request: SituacaoRequestDTO,
    service: ParcelamentoService = Depends(get_parcelamento_service),  # noqa: B008
) -> SituacaoDTO:
    return service.situacao(request)
