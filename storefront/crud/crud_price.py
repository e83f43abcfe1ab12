# storefront/crud/crud_price.py

import logging
from decimal import Decimal, InvalidOperation
from sqlalchemy.orm import Session

from .base import CRUDBase
from .crud_product import hydrate_unit
from .. import models, structs

logger = logging.getLogger(__name__)

class CRUDPrice(CRUDBase[models.ArticlePrice]):
    def get_product_prices(
        self, db: Session, *, product: structs.ProductMini, customer_group: structs.CustomerGroup
    ) -> list[structs.Price]:
        """
        Preços escalonados da VARIANTE para um grupo de clientes, ordenados
        pelo from_quantity do escalão (ascendente).
        Os preços devolvidos ainda não têm unidade nem grupo de clientes.
        """
        rows = (
            db.query(self.model)
            .filter(
                self.model.variant_id == product.variant_id,
                self.model.customer_group_key == customer_group.key,
            )
            .order_by(self.model.from_quantity.asc())
            .all()
        )
        return [hydrate_price(row) for row in rows]

    def get_cheapest_price(
        self, db: Session, *, product: structs.ProductMini, customer_group: structs.CustomerGroup
    ) -> structs.Price | None:
        """
        Preço mais barato do primeiro escalão entre TODAS as variantes ativas
        do artigo do produto.

        O preço leva a unidade da variante a que pertence, que não é
        necessariamente a variante recebida.
        """
        row = (
            db.query(self.model)
            .join(models.ArticleVariant, models.ArticleVariant.id == self.model.variant_id)
            .filter(
                self.model.article_id == product.id,
                self.model.customer_group_key == customer_group.key,
                self.model.from_quantity == 1,
                models.ArticleVariant.active.is_(True),
            )
            .order_by(self.model.price.asc(), self.model.id.asc())
            .first()
        )
        if row is None:
            return None

        price = hydrate_price(row)
        price.unit = hydrate_unit(row.variant)
        return price

    def get_price_group_discount(
        self, db: Session, *, price_group_id: int, customer_group: structs.CustomerGroup, quantity: int
    ) -> Decimal:
        """
        Maior desconto (percentagem) do grupo de preços configurado para o
        grupo de clientes com discount_start menor ou igual à quantidade.

        Configuração ausente ou não numérica conta como sem desconto (0).
        """
        rows = (
            db.query(models.PriceGroupDiscount.discount)
            .filter(
                models.PriceGroupDiscount.price_group_id == price_group_id,
                models.PriceGroupDiscount.customer_group_id == customer_group.id,
                models.PriceGroupDiscount.discount_start <= quantity,
            )
            .all()
        )
        discounts = [_parse_discount(raw, price_group_id) for (raw,) in rows]
        return max(discounts, default=Decimal("0"))

def _parse_discount(raw, price_group_id: int) -> Decimal:
    if raw is None:
        return Decimal("0")
    try:
        value = Decimal(str(raw).strip())
    except InvalidOperation:
        value = None
    if value is None or not value.is_finite():
        logger.warning("Ignoring non numeric discount %r of price group %s", raw, price_group_id)
        return Decimal("0")
    return value

def hydrate_price(row: models.ArticlePrice) -> structs.Price:
    pseudo_price = Decimal(str(row.pseudo_price)) if row.pseudo_price else None
    return structs.Price(
        price=Decimal(str(row.price)),
        pseudo_price=pseudo_price,
        from_quantity=row.from_quantity,
        to_quantity=row.to_quantity,
    )

price = CRUDPrice(models.ArticlePrice)
