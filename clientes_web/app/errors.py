import httpx


def _texto_seguro(response: httpx.Response) -> str:
    # leitura do corpo é best effort: qualquer falha vira ""
    try:
        return response.text
    except Exception:
        return ""


def mensagem_erro(response: httpx.Response) -> str:
    texto = _texto_seguro(response)
    return f"HTTP {response.status_code} - {texto or response.reason_phrase}"


class ClientesHTTPError(httpx.HTTPStatusError):
    """Resposta fora da faixa 2xx.

    Herda de HTTPStatusError, então quem já trata `raise_for_status()`
    (e.response.status_code etc.) continua funcionando.
    """

    def __init__(self, response: httpx.Response):
        super().__init__(mensagem_erro(response), request=response.request, response=response)
        self.status_code = response.status_code
        self.texto = _texto_seguro(response)
