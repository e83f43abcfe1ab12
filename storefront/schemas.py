from pydantic import BaseModel, ConfigDict
from typing import List, Optional
from decimal import Decimal

# --- Schemas de preço (o que a API da loja retorna) ---

class Price(BaseModel):
    from_quantity: int
    to_quantity: Optional[int] = None
    customer_group: Optional[str] = None  # chave do grupo de onde veio o preço

    # Valores guardados
    price: Decimal
    pseudo_price: Optional[Decimal] = None

    # Valores para o contexto do cliente
    calculated_price: Optional[Decimal] = None
    calculated_pseudo_price: Optional[Decimal] = None
    calculated_reference_price: Optional[Decimal] = None

    model_config = ConfigDict(from_attributes=True)

class ProductPrices(BaseModel):
    article_id: int
    variant_id: int
    number: str
    customer_group: str
    currency: str
    prices: List[Price] = []
    cheapest_price: Optional[Price] = None
    price_calculated: bool
