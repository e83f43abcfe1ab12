# storefront/models.py

from sqlalchemy import (
    Column, Integer, String, Boolean, Numeric, ForeignKey
)
from sqlalchemy.orm import relationship

from .database import Base

# --- CONFIGURAÇÃO DA LOJA ---

class CustomerGroup(Base):
    __tablename__ = "customer_groups"

    id = Column(Integer, primary_key=True, index=True)
    key = Column(String(15), unique=True, index=True, nullable=False)  # ex: "EK", "H"
    name = Column(String(255), nullable=False)
    display_gross_prices = Column(Boolean, nullable=False, default=True)

    # Desconto global do grupo no carrinho
    use_discount = Column(Boolean, nullable=False, default=False)
    percentage_discount = Column(Numeric(5, 2), nullable=False, default=0)

class Currency(Base):
    __tablename__ = "currencies"

    id = Column(Integer, primary_key=True, index=True)
    currency = Column(String(3), unique=True, index=True, nullable=False)  # ISO 4217
    name = Column(String(255), nullable=False)
    factor = Column(Numeric(10, 5), nullable=False, default=1)
    symbol = Column(String(10))
    is_default = Column(Boolean, nullable=False, default=False)

class Tax(Base):
    __tablename__ = "taxes"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    # Taxa padrão, usada quando nenhuma regra se aplica
    tax = Column(Numeric(5, 2), nullable=False)

    rules = relationship("TaxRule", back_populates="tax_group")

class TaxRule(Base):
    __tablename__ = "tax_rules"

    id = Column(Integer, primary_key=True, index=True)
    tax_id = Column(Integer, ForeignKey("taxes.id"), nullable=False)
    customer_group_id = Column(Integer, ForeignKey("customer_groups.id"), nullable=False)
    # País NULL significa que a regra vale para todos os países
    country_iso = Column(String(2), nullable=True)
    state_code = Column(String(10), nullable=True)
    tax = Column(Numeric(5, 2), nullable=False)
    active = Column(Boolean, nullable=False, default=True)

    tax_group = relationship("Tax", back_populates="rules")

class Unit(Base):
    __tablename__ = "units"

    id = Column(Integer, primary_key=True, index=True)
    unit = Column(String(20), nullable=False)  # ex: "kg", "l"
    name = Column(String(255), nullable=False)

# --- GRUPOS DE PREÇO ---

class PriceGroup(Base):
    __tablename__ = "price_groups"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)

    discounts = relationship("PriceGroupDiscount", back_populates="price_group", cascade="all, delete-orphan")

class PriceGroupDiscount(Base):
    __tablename__ = "price_group_discounts"

    id = Column(Integer, primary_key=True, index=True)
    price_group_id = Column(Integer, ForeignKey("price_groups.id"), nullable=False)
    customer_group_id = Column(Integer, ForeignKey("customer_groups.id"), nullable=False)
    # Quantidade mínima de compra a partir da qual o desconto se aplica
    discount_start = Column(Integer, nullable=False, default=1)
    # Guardado como texto pelo backend de administração, interpretado pelo gateway de preços
    discount = Column(String(20), nullable=True)

    price_group = relationship("PriceGroup", back_populates="discounts")

# --- CATÁLOGO ---

class Article(Base):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    tax_id = Column(Integer, ForeignKey("taxes.id"), nullable=False)
    price_group_id = Column(Integer, ForeignKey("price_groups.id"), nullable=True)

    variants = relationship("ArticleVariant", back_populates="article")

class ArticleVariant(Base):
    __tablename__ = "article_variants"

    id = Column(Integer, primary_key=True, index=True)
    article_id = Column(Integer, ForeignKey("articles.id"), nullable=False)
    number = Column(String(100), unique=True, index=True, nullable=False)  # ex: "SW2000.2"
    active = Column(Boolean, nullable=False, default=True)

    # Unidade de medida desta variante
    unit_id = Column(Integer, ForeignKey("units.id"), nullable=True)
    purchase_unit = Column(Numeric(11, 4), nullable=True)
    reference_unit = Column(Numeric(10, 3), nullable=True)
    min_purchase = Column(Integer, nullable=True)
    pack_unit = Column(String(255), nullable=True)

    article = relationship("Article", back_populates="variants")
    unit = relationship("Unit")

class ArticlePrice(Base):
    __tablename__ = "article_prices"

    id = Column(Integer, primary_key=True, index=True)
    article_id = Column(Integer, ForeignKey("articles.id"), nullable=False, index=True)
    variant_id = Column(Integer, ForeignKey("article_variants.id"), nullable=False, index=True)
    customer_group_key = Column(String(15), nullable=False, index=True)

    # Escalão de quantidade
    from_quantity = Column(Integer, nullable=False, default=1)
    to_quantity = Column(Integer, nullable=True)  # NULL = sem limite

    price = Column(Numeric(10, 2), nullable=False)
    pseudo_price = Column(Numeric(10, 2), nullable=False, default=0)

    variant = relationship("ArticleVariant")
