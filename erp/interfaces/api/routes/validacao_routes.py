from fastapi import APIRouter, Depends, HTTPException, Query

from erp.application.dtos.validacao_dto import ValidacaoDTO
from erp.application.services.validacao_service import ValidacaoService
from erp.interfaces.api.dependencies import get_validacao_service

router = APIRouter()


@router.get("/validacoes/{tipo}", response_model=ValidacaoDTO)
def validar(
    tipo: str,
    valor: str = Query(max_length=200),
    service: ValidacaoService = Depends(get_validacao_service),  # noqa: B008
) -> ValidacaoDTO:
    dto = service.validar(tipo, valor)
    if dto is None:
        raise HTTPException(status_code=404, detail=f"Validador desconhecido: {tipo}")
    return dto
