"""Validadores de campos de formulario.

Predicados puros: devolvem True/False e nunca levantam. Datas relativas a
"hoje" recebem a referencia como parametro.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum

from pydantic import AnyUrl, TypeAdapter, ValidationError

_EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_HORARIO = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")
_PLACA_MERCOSUL = re.compile(r"^[A-Z]{3}[0-9][A-Z][0-9]{2}$")
_PLACA_ANTIGA = re.compile(r"^[A-Z]{3}[0-9]{4}$")
_ESPECIAL = re.compile(r"[!@#$%^&*(),.?\":{}|<>]")

# MM-DD
FERIADOS_NACIONAIS_FIXOS = frozenset(
    {
        "01-01",  # Ano Novo
        "04-21",  # Tiradentes
        "05-01",  # Dia do Trabalho
        "09-07",  # Independencia
        "10-12",  # Nossa Senhora Aparecida
        "11-02",  # Finados
        "11-15",  # Proclamacao da Republica
        "12-25",  # Natal
    }
)

_URL = TypeAdapter(AnyUrl)


def _digitos(raw: str) -> str:
    return "".join(c for c in raw if c.isdigit())


def validar_email(email: str) -> bool:
    return _EMAIL.match(email) is not None


def validar_telefone(telefone: str) -> bool:
    """Fixo com 10 digitos ou celular com 11 (iniciando em 9), DDD 11-99."""
    numeros = _digitos(telefone)
    if len(numeros) not in (10, 11):
        return False
    if int(numeros[:2]) < 11:
        return False
    return len(numeros) == 10 or numeros[2] == "9"


def validar_cep(cep: str) -> bool:
    return len(_digitos(cep)) == 8


def validar_placa(placa: str) -> bool:
    limpa = re.sub(r"[^A-Za-z0-9]", "", placa).upper()
    return bool(_PLACA_MERCOSUL.match(limpa) or _PLACA_ANTIGA.match(limpa))


def validar_senha(senha: str) -> bool:
    """Minimo 8 caracteres com maiuscula, minuscula e numero."""
    return (
        len(senha) >= 8
        and re.search(r"[A-Z]", senha) is not None
        and re.search(r"[a-z]", senha) is not None
        and re.search(r"[0-9]", senha) is not None
    )


class NivelForca(str, Enum):
    FRACA = "fraca"
    MEDIA = "media"
    FORTE = "forte"


@dataclass(frozen=True)
class ForcaSenha:
    valida: bool
    forca: NivelForca
    mensagens: tuple[str, ...]


def avaliar_forca_senha(senha: str) -> ForcaSenha:
    """Um ponto por criterio atendido (5 criterios). Valida com 4 ou mais."""
    criterios = (
        (len(senha) >= 8, "Senha deve ter no minimo 8 caracteres"),
        (re.search(r"[A-Z]", senha) is not None, "Deve conter pelo menos uma letra maiuscula"),
        (re.search(r"[a-z]", senha) is not None, "Deve conter pelo menos uma letra minuscula"),
        (re.search(r"[0-9]", senha) is not None, "Deve conter pelo menos um numero"),
        (_ESPECIAL.search(senha) is not None, "Deve conter pelo menos um caractere especial"),
    )
    pontos = sum(1 for ok, _ in criterios if ok)
    mensagens = tuple(msg for ok, msg in criterios if not ok)

    if pontos <= 2:
        forca = NivelForca.FRACA
    elif pontos <= 4:
        forca = NivelForca.MEDIA
    else:
        forca = NivelForca.FORTE

    return ForcaSenha(valida=pontos >= 4, forca=forca, mensagens=mensagens)


def _para_decimal(valor: Decimal | int | float | str) -> Decimal | None:
    try:
        numero = Decimal(str(valor).strip())
    except InvalidOperation:
        return None
    return numero if numero.is_finite() else None


def validar_porcentagem(valor: Decimal | int | float | str) -> bool:
    numero = _para_decimal(valor)
    return numero is not None and Decimal("0") <= numero <= Decimal("100")


def validar_valor_positivo(valor: Decimal | int | float | str) -> bool:
    numero = _para_decimal(valor)
    return numero is not None and numero > 0


def validar_valor_nao_negativo(valor: Decimal | int | float | str) -> bool:
    numero = _para_decimal(valor)
    return numero is not None and numero >= 0


def validar_horario(horario: str) -> bool:
    return _HORARIO.match(horario) is not None


def validar_intervalo_datas(inicio: date, fim: date) -> bool:
    """Inicio nao pode ser posterior ao fim."""
    return inicio <= fim


def validar_intervalo_minimo(inicio: date, fim: date, dias_minimos: int) -> bool:
    return (fim - inicio).days >= dias_minimos


def validar_data_futura(data: date, referencia: date) -> bool:
    return data > referencia


def validar_data_passada(data: date, referencia: date) -> bool:
    return data < referencia


def eh_dia_util(data: date) -> bool:
    """Segunda a sexta, fora dos feriados nacionais de data fixa."""
    if data.weekday() >= 5:
        return False
    return data.strftime("%m-%d") not in FERIADOS_NACIONAIS_FIXOS


def validar_cnae(cnae: str) -> bool:
    return len(_digitos(cnae)) == 7


def validar_codigo_barras(codigo: str) -> bool:
    """EAN-13: pesos 1 e 3 alternados, digito = (10 - soma % 10) % 10."""
    numeros = _digitos(codigo)
    if len(numeros) != 13:
        return False
    soma = sum(int(d) * (1 if i % 2 == 0 else 3) for i, d in enumerate(numeros[:12]))
    return (10 - soma % 10) % 10 == int(numeros[12])


def validar_texto_obrigatorio(texto: str | None) -> bool:
    return bool(texto and texto.strip())


def validar_url(url: str) -> bool:
    try:
        _URL.validate_python(url)
    except ValidationError:
        return False
    return True
