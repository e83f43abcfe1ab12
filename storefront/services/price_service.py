# storefront/services/price_service.py

import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from .. import crud, structs

logger = logging.getLogger(__name__)

HUNDRED = Decimal("100")

class PriceService:
    """
    Transforma os preços guardados de um produto nos preços que o cliente vê.

    O serviço não guarda estado além da sessão do banco; tudo o que depende
    do cliente vem do Context passado em cada chamada.
    """
    def __init__(self, db: Session):
        # O serviço recebe a sessão do banco ao ser instanciado
        self.db = db

    def get_product_prices(self, *, product: structs.ProductMini, context: structs.Context) -> list[structs.Price]:
        """
        Preços escalonados da variante para o grupo de clientes atual.

        Se o grupo atual não tiver preços, usa o grupo de fallback. O grupo onde
        os preços foram encontrados fica em cada preço, junto com a unidade do
        produto. Uma lista vazia significa "sem preço".
        """
        customer_group = context.current_customer_group
        prices = crud.price.get_product_prices(self.db, product=product, customer_group=customer_group)

        if not prices:
            customer_group = context.fallback_customer_group
            logger.debug(
                "No prices for variant %s in group %s, using fallback group %s",
                product.variant_id, context.current_customer_group.key, customer_group.key,
            )
            prices = crud.price.get_product_prices(self.db, product=product, customer_group=customer_group)

        if not prices:
            logger.debug("No prices available for variant %s", product.variant_id)

        for price in prices:
            price.unit = product.unit
            price.customer_group = customer_group

        return prices

    def get_cheapest_price(self, *, product: structs.ProductMini, context: structs.Context) -> structs.Price | None:
        """
        Preço mais barato entre todas as variantes do produto, já com o
        desconto do grupo de preços aplicado.

        A unidade do preço devolvido é a da variante a que o preço pertence
        e não é alterada aqui.
        """
        customer_group = context.current_customer_group
        cheapest_price = crud.price.get_cheapest_price(self.db, product=product, customer_group=customer_group)

        if cheapest_price is None:
            customer_group = context.fallback_customer_group
            cheapest_price = crud.price.get_cheapest_price(self.db, product=product, customer_group=customer_group)

        if cheapest_price is None:
            logger.debug("No cheapest price available for article %s", product.id)
            return None

        self._apply_price_group_discount(product, cheapest_price, context)
        cheapest_price.customer_group = customer_group

        return cheapest_price

    def calculate_product(self, *, product: structs.ProductMini, context: structs.Context) -> None:
        """
        Calcula (no próprio objeto) os preços escalonados, os preços de
        comparação e de referência e o preço mais barato do produto, e marca
        o produto com ProductState.PRICE_CALCULATED.

        product.prices e product.cheapest_price já devem estar resolvidos.
        """
        tax = context.get_tax_rule(product.tax_id)

        for price in product.prices:
            self._calculate_price_struct(price, tax, context)

        if product.cheapest_price is not None:
            self._calculate_price_struct(product.cheapest_price, tax, context)

        product.add_state(structs.ProductState.PRICE_CALCULATED)

    def get_calculated_product(self, *, product: structs.ProductMini, context: structs.Context) -> structs.ProductMini:
        """Busca todos os preços do produto e calcula-os."""
        product.prices = self.get_product_prices(product=product, context=context)
        product.cheapest_price = self.get_cheapest_price(product=product, context=context)
        self.calculate_product(product=product, context=context)
        return product

    def _apply_price_group_discount(
        self, product: structs.ProductMini, cheapest_price: structs.Price, context: structs.Context
    ) -> None:
        if not product.price_group_id:
            return
        # A quantidade do desconto é a compra mínima da unidade do preço
        if cheapest_price.unit is None:
            return

        discount = crud.price.get_price_group_discount(
            self.db,
            price_group_id=product.price_group_id,
            customer_group=context.current_customer_group,
            quantity=cheapest_price.unit.min_purchase or 1,
        )
        cheapest_price.price = cheapest_price.price / HUNDRED * (HUNDRED - discount)

    def _calculate_price_struct(self, price: structs.Price, tax: structs.Tax, context: structs.Context) -> None:
        """
        Preenche os campos calculated_* de um preço.

        O preço de referência parte do preço já calculado e só existe quando
        a unidade tem purchase_unit diferente de zero E tem reference_unit.
        Sem reference_unit não há preço de referência (fica None), em vez de
        um valor por unidade de referência inexistente.
        """
        price.calculated_price = self._calculate_price(price.price, tax, context)

        if price.pseudo_price is not None:
            price.calculated_pseudo_price = self._calculate_price(price.pseudo_price, tax, context)

        unit = price.unit
        if unit is not None and unit.purchase_unit and unit.reference_unit is not None:
            price.calculated_reference_price = price.calculated_price / unit.purchase_unit * unit.reference_unit

    def _calculate_price(self, amount: Decimal, tax: structs.Tax, context: structs.Context) -> Decimal:
        """
        Desconto do grupo de clientes, depois fator da moeda, depois imposto.

        Usa sempre o grupo de clientes ATUAL, mesmo para preços que vieram
        do grupo de fallback.
        """
        customer_group = context.current_customer_group

        if customer_group.use_discount and customer_group.percentage_discount:
            amount = amount - (amount / HUNDRED * customer_group.percentage_discount)

        amount = amount * context.currency.factor

        if not customer_group.display_gross_prices:
            return amount

        return amount * (HUNDRED + tax.tax) / HUNDRED
