# storefront/crud/crud_currency.py

from decimal import Decimal
from sqlalchemy.orm import Session

from .base import CRUDBase
from .. import models, structs

class CRUDCurrency(CRUDBase[models.Currency]):
    def get_by_code(self, db: Session, *, code: str) -> models.Currency | None:
        return db.query(self.model).filter(self.model.currency == code.upper()).first()

    def get_default(self, db: Session) -> models.Currency | None:
        """Busca a moeda base da loja (a marcada como padrão)."""
        return (
            db.query(self.model)
            .filter(self.model.is_default.is_(True))
            .order_by(self.model.id.asc())
            .first()
        )

def hydrate_currency(db_currency: models.Currency) -> structs.Currency:
    return structs.Currency(
        id=db_currency.id,
        currency=db_currency.currency,
        factor=Decimal(str(db_currency.factor)),
    )

currency = CRUDCurrency(models.Currency)
