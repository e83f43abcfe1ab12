# storefront/crud/crud_tax.py

from decimal import Decimal
from sqlalchemy.orm import Session

from .base import CRUDBase
from .. import models, structs

class CRUDTax(CRUDBase[models.Tax]):
    def get_all(self, db: Session) -> list[models.Tax]:
        return db.query(self.model).order_by(self.model.id.asc()).all()

    def get_rules(self, db: Session, *, customer_group_id: int) -> list[models.TaxRule]:
        """Busca as regras de imposto ativas de um grupo de clientes."""
        return (
            db.query(models.TaxRule)
            .filter(
                models.TaxRule.customer_group_id == customer_group_id,
                models.TaxRule.active.is_(True),
            )
            .all()
        )

def hydrate_tax(db_tax: models.Tax, rate=None) -> structs.Tax:
    """Monta o struct Tax, trocando a taxa padrão pela taxa da regra quando houver."""
    return structs.Tax(
        id=db_tax.id,
        name=db_tax.name,
        tax=Decimal(str(db_tax.tax if rate is None else rate)),
    )

tax = CRUDTax(models.Tax)
