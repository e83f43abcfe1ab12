# tests/integration/test_crud_price.py

from decimal import Decimal
from sqlalchemy.orm import Session

from storefront import crud
from storefront.crud.crud_customer_group import hydrate_customer_group
from tests.utils.product import (
    create_article, create_customer_group, create_price, create_price_group,
    create_price_group_discount, create_tax, create_unit, create_variant,
)

def test_product_prices_are_scoped_to_variant_and_ordered(db: Session):
    """Os escalões vêm por from_quantity crescente e só da variante pedida."""
    group = create_customer_group(db, key="EK")
    article = create_article(db, tax_id=create_tax(db).id)
    variant = create_variant(db, article_id=article.id)
    other_variant = create_variant(db, article_id=article.id)
    create_price(db, variant=variant, customer_group_key="EK", price=8, from_quantity=11)
    create_price(db, variant=variant, customer_group_key="EK", price=10, from_quantity=1, to_quantity=10)
    create_price(db, variant=other_variant, customer_group_key="EK", price=1)
    create_price(db, variant=variant, customer_group_key="H", price=5)

    product = crud.product.get_product_mini(db, variant_id=variant.id)
    prices = crud.price.get_product_prices(db, product=product, customer_group=hydrate_customer_group(group))

    assert [p.from_quantity for p in prices] == [1, 11]
    assert [p.price for p in prices] == [Decimal("10"), Decimal("8")]
    assert prices[0].to_quantity == 10
    assert all(p.unit is None and p.customer_group is None for p in prices)

def test_zero_pseudo_price_is_hydrated_as_absent(db: Session):
    group = create_customer_group(db, key="EK")
    variant = create_variant(db, article_id=create_article(db, tax_id=create_tax(db).id).id)
    create_price(db, variant=variant, customer_group_key="EK", price=10, pseudo_price=0)

    product = crud.product.get_product_mini(db, variant_id=variant.id)
    prices = crud.price.get_product_prices(db, product=product, customer_group=hydrate_customer_group(group))

    assert prices[0].pseudo_price is None

def test_cheapest_price_spans_variants_and_carries_their_unit(db: Session):
    """SW2000 não tem unidade, a irmã mais barata SW2000.2 tem: o preço mais barato fica com a unidade da irmã."""
    group = create_customer_group(db, key="EK")
    article = create_article(db, tax_id=create_tax(db).id)
    liter = create_unit(db, unit="l", name="Liter")
    variant = create_variant(db, article_id=article.id)
    sibling = create_variant(db, article_id=article.id, unit_id=liter.id, purchase_unit=0.5, reference_unit=1, min_purchase=2)
    create_price(db, variant=variant, customer_group_key="EK", price=20)
    create_price(db, variant=sibling, customer_group_key="EK", price=15)
    # Escalões acima de 1 não entram
    create_price(db, variant=variant, customer_group_key="EK", price=5, from_quantity=10)

    product = crud.product.get_product_mini(db, variant_id=variant.id)
    cheapest = crud.price.get_cheapest_price(db, product=product, customer_group=hydrate_customer_group(group))

    assert product.unit is None
    assert cheapest.price == Decimal("15")
    assert cheapest.unit.unit == "l"
    assert cheapest.unit.purchase_unit == Decimal("0.5")
    assert cheapest.unit.min_purchase == 2

def test_cheapest_price_ignores_inactive_variants(db: Session):
    group = create_customer_group(db, key="EK")
    article = create_article(db, tax_id=create_tax(db).id)
    variant = create_variant(db, article_id=article.id)
    inactive = create_variant(db, article_id=article.id, active=False)
    create_price(db, variant=variant, customer_group_key="EK", price=20)
    create_price(db, variant=inactive, customer_group_key="EK", price=1)

    product = crud.product.get_product_mini(db, variant_id=variant.id)
    cheapest = crud.price.get_cheapest_price(db, product=product, customer_group=hydrate_customer_group(group))

    assert cheapest.price == Decimal("20")

def test_cheapest_price_without_prices_is_none(db: Session):
    group = create_customer_group(db, key="EK")
    variant = create_variant(db, article_id=create_article(db, tax_id=create_tax(db).id).id)

    product = crud.product.get_product_mini(db, variant_id=variant.id)

    assert crud.price.get_cheapest_price(db, product=product, customer_group=hydrate_customer_group(group)) is None

def test_price_group_discount_returns_highest_discount_up_to_quantity(db: Session):
    group = hydrate_customer_group(create_customer_group(db, key="EK"))
    price_group = create_price_group(db)
    create_price_group_discount(db, price_group_id=price_group.id, customer_group_id=group.id, discount="5", discount_start=1)
    create_price_group_discount(db, price_group_id=price_group.id, customer_group_id=group.id, discount="10", discount_start=5)
    create_price_group_discount(db, price_group_id=price_group.id, customer_group_id=group.id, discount="20", discount_start=50)

    assert crud.price.get_price_group_discount(db, price_group_id=price_group.id, customer_group=group, quantity=1) == Decimal("5")
    assert crud.price.get_price_group_discount(db, price_group_id=price_group.id, customer_group=group, quantity=10) == Decimal("10")

def test_price_group_discount_is_zero_when_not_configured(db: Session):
    group = hydrate_customer_group(create_customer_group(db, key="EK"))
    price_group = create_price_group(db)

    discount = crud.price.get_price_group_discount(db, price_group_id=price_group.id, customer_group=group, quantity=1)

    assert discount == Decimal("0")

def test_price_group_discount_is_zero_when_not_numeric(db: Session):
    group = hydrate_customer_group(create_customer_group(db, key="EK"))
    price_group = create_price_group(db)
    create_price_group_discount(db, price_group_id=price_group.id, customer_group_id=group.id, discount="ten")

    discount = crud.price.get_price_group_discount(db, price_group_id=price_group.id, customer_group=group, quantity=1)

    assert discount == Decimal("0")

def test_product_mini_of_unknown_variant_is_none(db: Session):
    assert crud.product.get_product_mini(db, variant_id=12345) is None
