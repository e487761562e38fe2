import json
import logging
from typing import Any, Optional, Union

import httpx
from pydantic import BaseModel

from ..config import ClientesConfig
from ..errors import ClientesHTTPError
from ..schemas import Registro, RequestOptions, Validador

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}

ClienteId = Union[str, int]


def _serializar(data: Union[Registro, BaseModel]) -> str:
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json")
    return json.dumps(data, allow_nan=False)


class ClientesClient:
    def __init__(
        self,
        config: ClientesConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        validar: Optional[Validador] = None,
    ):
        self.config = config
        self._transport = transport
        self._validar = validar

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def build_url(self, path: str) -> str:
        # sem encoding: o id precisa chegar seguro para URL
        return f"{self.base_url}/{path.lstrip('/')}"

    async def request(self, path: str, options: Optional[RequestOptions] = None) -> Any:
        options = options or RequestOptions()
        url = self.build_url(path)
        headers = httpx.Headers(DEFAULT_HEADERS)
        headers.update(options.headers)

        logger.debug("%s %s", options.method, url)
        async with httpx.AsyncClient(transport=self._transport, follow_redirects=True) as client:
            r = await client.request(
                options.method,
                url,
                headers=headers,
                content=options.body,
                timeout=self.config.timeout,
            )
        logger.debug("%s %s -> %s", options.method, url, r.status_code)

        if not r.is_success:
            erro = ClientesHTTPError(r)
            logger.warning("%s %s falhou: %s", options.method, url, erro)
            raise erro

        if r.status_code == 204:
            return None
        return r.json()

    def _aplicar_validador(self, resultado: Any) -> Any:
        if self._validar is None or resultado is None:
            return resultado
        if isinstance(resultado, list):
            return [self._validar(item) for item in resultado]
        return self._validar(resultado)

    # ------------------------------------------------------------------
    # CRUD de clientes
    # ------------------------------------------------------------------
    async def listar_clientes(self) -> Any:
        return self._aplicar_validador(
            await self.request("clientes", RequestOptions(method="GET"))
        )

    async def buscar_cliente(self, id_: ClienteId) -> Any:
        return self._aplicar_validador(
            await self.request(f"clientes/{id_}", RequestOptions(method="GET"))
        )

    async def criar_cliente(self, data: Union[Registro, BaseModel]) -> Any:
        return self._aplicar_validador(
            await self.request("clientes", RequestOptions(method="POST", body=_serializar(data)))
        )

    async def atualizar_cliente(self, id_: ClienteId, data: Union[Registro, BaseModel]) -> Any:
        return self._aplicar_validador(
            await self.request(f"clientes/{id_}", RequestOptions(method="PUT", body=_serializar(data)))
        )

    async def deletar_cliente(self, id_: ClienteId) -> Any:
        # 204 -> None; qualquer outro 2xx devolve o JSON do servidor.
        # O corpo do DELETE não é um registro de cliente: não passa pelo validador.
        return await self.request(f"clientes/{id_}", RequestOptions(method="DELETE"))


def get_client() -> ClientesClient:
    return ClientesClient(ClientesConfig.from_env())
