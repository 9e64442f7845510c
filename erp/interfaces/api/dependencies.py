from erp.application.services.folha_service import FolhaService
from erp.application.services.parcelamento_service import ParcelamentoService
from erp.application.services.ponto_service import PontoService
from erp.application.services.rateio_service import RateioService
from erp.application.services.validacao_service import ValidacaoService


def get_rateio_service() -> RateioService:
    return RateioService()


def get_parcelamento_service() -> ParcelamentoService:
    return ParcelamentoService()


def get_ponto_service() -> PontoService:
    return PontoService()


def get_folha_service() -> FolhaService:
    return FolhaService()


def get_validacao_service() -> ValidacaoService:
    return ValidacaoService()
