# storefront/structs.py
"""
Objetos de valor usados pelo serviço de preços durante UM pedido (request).

São hidratados a partir dos modelos ORM pelos gateways em ``storefront.crud``,
entregues aos serviços e depois descartados. Nada aqui volta para o banco.
"""

import enum
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional, Set


@dataclass(frozen=True)
class Tax:
    id: int
    name: str
    tax: Decimal  # percentagem, ex: Decimal("19.00")


@dataclass(frozen=True)
class Currency:
    id: int
    currency: str
    factor: Decimal


@dataclass(frozen=True)
class Unit:
    """
    Unidade de medida de uma variante.

    purchase_unit / reference_unit definem o preço de referência
    (ex: vende-se 0,5 l, o preço é mostrado por 1 l).
    """
    id: int
    unit: str
    name: str
    purchase_unit: Optional[Decimal] = None
    reference_unit: Optional[Decimal] = None
    min_purchase: Optional[int] = None


@dataclass(frozen=True)
class CustomerGroup:
    id: int
    key: str
    name: str
    use_discount: bool = False
    percentage_discount: Decimal = Decimal("0")
    display_gross_prices: bool = True


@dataclass
class Price:
    """
    Um preço guardado (um escalão de quantidade, ou o preço mais barato).

    Os campos calculated_* ficam a None até o PriceService.calculate_product
    processar o produto dono do preço.
    """
    price: Decimal
    pseudo_price: Optional[Decimal] = None
    from_quantity: int = 1
    to_quantity: Optional[int] = None
    unit: Optional[Unit] = None
    customer_group: Optional[CustomerGroup] = None

    calculated_price: Optional[Decimal] = None
    calculated_pseudo_price: Optional[Decimal] = None
    calculated_reference_price: Optional[Decimal] = None


class ProductState(str, enum.Enum):
    PRICE_CALCULATED = "price_calculated"


@dataclass
class ProductMini:
    """Projeção mínima de uma variante de produto para o cálculo de preços."""
    id: int  # id do artigo, partilhado por todas as variantes
    variant_id: int
    number: str
    name: str
    tax_id: int
    unit: Optional[Unit] = None
    price_group_id: Optional[int] = None

    prices: List[Price] = field(default_factory=list)
    cheapest_price: Optional[Price] = None
    states: Set[ProductState] = field(default_factory=set)

    def add_state(self, state: ProductState) -> None:
        self.states.add(state)

    def has_state(self, state: ProductState) -> bool:
        return state in self.states


@dataclass(frozen=True)
class Context:
    """
    Contexto do cliente no pedido atual.

    tax_rules mapeia o id de um imposto para a taxa já resolvida para o
    grupo de clientes atual e para o país/estado do cliente.
    """
    current_customer_group: CustomerGroup
    fallback_customer_group: CustomerGroup
    currency: Currency
    tax_rules: Dict[int, Tax] = field(default_factory=dict)

    def get_tax_rule(self, tax_id: int) -> Tax:
        return self.tax_rules[tax_id]
