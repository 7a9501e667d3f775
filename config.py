from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

VERSION = "1.0.0"

class Settings(BaseSettings):
    """
    Configuração do servidor da IDE Silli.
    Prioridade: variáveis de ambiente (SILLI_*) > arquivo .env > padrões.
    """
    host: str = Field(default="0.0.0.0", description="Endereço de escuta do servidor")
    port: int = Field(default=8000, description="Porta do servidor")
    reload: bool = Field(default=False, description="Recarrega o servidor ao editar o código")
    debug: bool = Field(default=False, description="Inclui a listagem de depuração nas respostas")

    model_config = SettingsConfigDict(env_prefix="SILLI_", env_file=".env", extra="ignore")

def get_settings():
    return Settings()
