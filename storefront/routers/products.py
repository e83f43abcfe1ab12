# storefront/routers/products.py

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from .. import crud, schemas, structs
from ..core.config import settings
from ..database import get_db
from ..services.context_service import ContextResolutionError, ContextService
from ..services.price_service import PriceService

router = APIRouter(
    prefix="/products",
    tags=["Products"]
)

def get_price_service(db: Session = Depends(get_db)) -> PriceService:
    return PriceService(db=db)

def get_context_service(db: Session = Depends(get_db)) -> ContextService:
    return ContextService(db=db)

def _price_to_schema(price: structs.Price) -> schemas.Price:
    return schemas.Price(
        from_quantity=price.from_quantity,
        to_quantity=price.to_quantity,
        customer_group=price.customer_group.key if price.customer_group else None,
        price=price.price,
        pseudo_price=price.pseudo_price,
        calculated_price=price.calculated_price,
        calculated_pseudo_price=price.calculated_pseudo_price,
        calculated_reference_price=price.calculated_reference_price,
    )

@router.get("/{variant_id}/prices", response_model=schemas.ProductPrices)
def read_product_prices(
    variant_id: int,
    customer_group: str = settings.DEFAULT_CUSTOMER_GROUP,
    currency: str | None = None,
    country: str | None = None,
    state: str | None = None,
    db: Session = Depends(get_db),
    price_service: PriceService = Depends(get_price_service),
    context_service: ContextService = Depends(get_context_service),
):
    """
    Retorna os preços escalonados e o preço mais barato de uma variante,
    calculados para o grupo de clientes, a moeda e a localização fiscal do cliente.

    Uma variante sem nenhum preço é devolvida com a lista de preços vazia.
    """
    product = crud.product.get_product_mini(db, variant_id=variant_id)
    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product variant with id {variant_id} not found."
        )

    try:
        context = context_service.create_context(
            customer_group_key=customer_group,
            currency_code=currency,
            country_iso=country,
            state_code=state,
        )
    except ContextResolutionError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    product = price_service.get_calculated_product(product=product, context=context)

    return schemas.ProductPrices(
        article_id=product.id,
        variant_id=product.variant_id,
        number=product.number,
        customer_group=context.current_customer_group.key,
        currency=context.currency.currency,
        prices=[_price_to_schema(p) for p in product.prices],
        cheapest_price=_price_to_schema(product.cheapest_price) if product.cheapest_price else None,
        price_calculated=product.has_state(structs.ProductState.PRICE_CALCULATED),
    )
