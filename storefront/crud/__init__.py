from .crud_customer_group import customer_group
from .crud_currency import currency
from .crud_price import price
from .crud_product import product
from .crud_tax import tax
