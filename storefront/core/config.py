# storefront/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """
    Configurações da aplicação, lidas das variáveis de ambiente (e de um .env opcional).
    """
    # --- Banco de dados ---
    DATABASE_URL: str = "sqlite:///./storefront.db"

    # --- API ---
    API_V1_STR: str = "/api/v1"

    # --- Padrões da loja ---
    # Grupo de clientes usado quando o pedido não indica nenhum
    DEFAULT_CUSTOMER_GROUP: str = "EK"
    # Grupo de clientes consultado quando o grupo do cliente não tem preços
    FALLBACK_CUSTOMER_GROUP: str = "EK"
    DEFAULT_CURRENCY: str = "EUR"

    # --- Logging ---
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

# Instância única das configurações, partilhada por toda a aplicação
settings = Settings()
