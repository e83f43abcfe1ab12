# storefront/main.py

from fastapi import FastAPI

from .core.config import settings
from .core.logging import setup_logging
from .routers import products

# Configura o logging antes de criar a aplicação
setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title="Storefront Pricing API",
    description="Calcula os preços mostrados aos clientes da loja."
)

app.include_router(products.router, prefix=settings.API_V1_STR)

@app.get("/")
def read_root():
    """
    Endpoint raiz. Confirma que a API está no ar.
    """
    return {"message": "Storefront pricing API is running."}
