import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class ClientesConfig(BaseModel):
    # resolvida uma vez na inicialização e repassada a cada ClientesClient
    model_config = ConfigDict(frozen=True)

    base_url: str = ""
    timeout: Optional[float] = None  # None = sem limite de tempo

    @field_validator("base_url")
    @classmethod
    def _sem_barra_final(cls, v: str) -> str:
        return v.rstrip("/")

    @classmethod
    def from_env(cls) -> "ClientesConfig":
        #Use env API_BASE_URL para trocar entre local e Docker.
        return cls(base_url=os.getenv("API_BASE_URL", ""))
