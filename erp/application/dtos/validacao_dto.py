from pydantic import BaseModel


class ValidacaoDTO(BaseModel):
    tipo: str
    valido: bool
