from __future__ import annotations

from decimal import Decimal

from erp.domain.folha.services import calcular_inss, calcular_irpf, calcular_salario_liquido

from ..dtos.folha_dto import HoleriteDTO, ImpostoDTO, SalarioRequestDTO


class FolhaService:
    def inss(self, salario_base: Decimal) -> ImpostoDTO:
        return ImpostoDTO.from_domain(salario_base, calcular_inss(salario_base))

    def irpf(self, salario_base: Decimal, dependentes: int = 0) -> ImpostoDTO:
        return ImpostoDTO.from_domain(salario_base, calcular_irpf(salario_base, dependentes))

    def holerite(self, request: SalarioRequestDTO) -> HoleriteDTO:
        resultado = calcular_salario_liquido(
            request.salario_base,
            request.adicionais.to_domain(),
            request.descontos.to_domain(),
            request.dependentes,
        )
        return HoleriteDTO.from_domain(resultado)
