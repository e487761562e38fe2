from pydantic import BaseModel, Field
from typing import Any, Callable, Dict, Literal, Optional, Type, Union

# registro de cliente: o formato é definido pelo servidor
Registro = Dict[str, Any]

Validador = Callable[[Any], Any]


class RequestOptions(BaseModel):
    method: Literal["GET", "POST", "PUT", "DELETE", "PATCH"] = "GET"
    headers: Dict[str, str] = Field(default_factory=dict, description="Sobrescrevem os headers padrão")
    body: Optional[Union[str, bytes]] = Field(None, description="Payload já serializado")


def validar_com(model: Type[BaseModel]) -> Validador:
    """Cria um hook de validação a partir de um schema pydantic.

    O hook devolve a instância validada; ValidationError sobe para quem chamou.
    """
    return model.model_validate
