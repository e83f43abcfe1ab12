# storefront/crud/crud_product.py

from decimal import Decimal
from sqlalchemy.orm import Session, joinedload

from .base import CRUDBase
from .. import models, structs

class CRUDProduct(CRUDBase[models.ArticleVariant]):
    def get_product_mini(self, db: Session, *, variant_id: int) -> structs.ProductMini | None:
        """
        Busca uma variante ativa junto com o artigo e a unidade e monta a
        projeção mínima do produto usada pelo serviço de preços.
        Os preços NÃO são carregados aqui, ver PriceService.
        """
        variant = (
            db.query(self.model)
            .options(joinedload(self.model.article), joinedload(self.model.unit))
            .filter(self.model.id == variant_id, self.model.active.is_(True))
            .first()
        )
        if variant is None:
            return None

        return structs.ProductMini(
            id=variant.article_id,
            variant_id=variant.id,
            number=variant.number,
            name=variant.article.name,
            tax_id=variant.article.tax_id,
            unit=hydrate_unit(variant),
            price_group_id=variant.article.price_group_id,
        )

def _optional_decimal(value) -> Decimal | None:
    return None if value is None else Decimal(str(value))

def hydrate_unit(variant: models.ArticleVariant) -> structs.Unit | None:
    """
    Junta a unidade de medida da variante com as quantidades de compra e
    de referência da própria variante. Variante sem unidade não tem Unit.
    """
    if variant.unit is None:
        return None
    return structs.Unit(
        id=variant.unit.id,
        unit=variant.unit.unit,
        name=variant.unit.name,
        purchase_unit=_optional_decimal(variant.purchase_unit),
        reference_unit=_optional_decimal(variant.reference_unit),
        min_purchase=variant.min_purchase,
    )

product = CRUDProduct(models.ArticleVariant)
