from __future__ import annotations

from collections.abc import Callable

from erp.domain.validacao.documentos import (
    validar_chassi,
    validar_cnpj,
    validar_cpf,
    validar_cpf_ou_cnpj,
    validar_renavam,
)
from erp.domain.validacao.validadores import (
    validar_cep,
    validar_cnae,
    validar_codigo_barras,
    validar_email,
    validar_horario,
    validar_placa,
    validar_porcentagem,
    validar_senha,
    validar_telefone,
    validar_url,
)

from ..dtos.validacao_dto import ValidacaoDTO

# Validadores de campo unico expostos para os formularios.
VALIDADORES: dict[str, Callable[[str], bool]] = {
    "cpf": validar_cpf,
    "cnpj": validar_cnpj,
    "documento": validar_cpf_ou_cnpj,
    "email": validar_email,
    "telefone": validar_telefone,
    "cep": validar_cep,
    "placa": validar_placa,
    "senha": validar_senha,
    "porcentagem": validar_porcentagem,
    "horario": validar_horario,
    "renavam": validar_renavam,
    "chassi": validar_chassi,
    "cnae": validar_cnae,
    "codigo-barras": validar_codigo_barras,
    "url": validar_url,
}


class ValidacaoService:
    def validar(self, tipo: str, valor: str) -> ValidacaoDTO | None:
        """None quando o tipo nao existe."""
        validador = VALIDADORES.get(tipo)
        if validador is None:
            return None
        return ValidacaoDTO(tipo=tipo, valido=validador(valor))
