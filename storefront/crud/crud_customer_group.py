# storefront/crud/crud_customer_group.py

from decimal import Decimal
from sqlalchemy.orm import Session

from .base import CRUDBase
from .. import models, structs

class CRUDCustomerGroup(CRUDBase[models.CustomerGroup]):
    def get_by_key(self, db: Session, *, key: str) -> models.CustomerGroup | None:
        return db.query(self.model).filter(self.model.key == key).first()

def hydrate_customer_group(db_group: models.CustomerGroup) -> structs.CustomerGroup:
    return structs.CustomerGroup(
        id=db_group.id,
        key=db_group.key,
        name=db_group.name,
        use_discount=bool(db_group.use_discount),
        percentage_discount=Decimal(str(db_group.percentage_discount or 0)),
        display_gross_prices=bool(db_group.display_gross_prices),
    )

customer_group = CRUDCustomerGroup(models.CustomerGroup)
