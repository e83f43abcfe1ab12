# storefront/services/context_service.py

import logging

from sqlalchemy.orm import Session

from .. import crud, models, structs
from ..core.config import settings
from ..crud.crud_currency import hydrate_currency
from ..crud.crud_customer_group import hydrate_customer_group
from ..crud.crud_tax import hydrate_tax

logger = logging.getLogger(__name__)

class ContextResolutionError(LookupError):
    """Levantada quando o contexto do cliente aponta para configuração inexistente da loja."""
    pass

class ContextService:
    def __init__(self, db: Session):
        self.db = db

    def create_context(
        self,
        *,
        customer_group_key: str,
        currency_code: str | None = None,
        country_iso: str | None = None,
        state_code: str | None = None,
    ) -> structs.Context:
        """
        Monta o contexto (somente leitura) do cliente para um pedido.

        1. Grupo de clientes atual e grupo de fallback.
        2. Moeda pedida, ou a moeda padrão da loja.
        3. Uma taxa resolvida por imposto, para o grupo de clientes atual e
           o país/estado do cliente.
        """
        current_group = self._get_customer_group(customer_group_key)
        fallback_group = self._get_customer_group(settings.FALLBACK_CUSTOMER_GROUP)

        if currency_code:
            db_currency = crud.currency.get_by_code(self.db, code=currency_code)
        else:
            db_currency = crud.currency.get_default(self.db)
        if db_currency is None:
            raise ContextResolutionError(f"Currency '{currency_code or settings.DEFAULT_CURRENCY}' not found.")

        rules = crud.tax.get_rules(self.db, customer_group_id=current_group.id)
        tax_rules = {}
        for db_tax in crud.tax.get_all(self.db):
            rule = select_tax_rule(
                [r for r in rules if r.tax_id == db_tax.id],
                country_iso=country_iso,
                state_code=state_code,
            )
            tax_rules[db_tax.id] = hydrate_tax(db_tax, rate=rule.tax if rule is not None else None)

        return structs.Context(
            current_customer_group=current_group,
            fallback_customer_group=fallback_group,
            currency=hydrate_currency(db_currency),
            tax_rules=tax_rules,
        )

    def _get_customer_group(self, key: str) -> structs.CustomerGroup:
        db_group = crud.customer_group.get_by_key(self.db, key=key)
        if db_group is None:
            raise ContextResolutionError(f"Customer group '{key}' not found.")
        return hydrate_customer_group(db_group)

def select_tax_rule(
    rules: list[models.TaxRule], *, country_iso: str | None, state_code: str | None
) -> models.TaxRule | None:
    """
    Escolhe a regra mais específica para a localização do cliente:
    país + estado, depois só país, depois regras sem país.
    """
    best = None
    best_score = -1
    for rule in rules:
        if rule.country_iso is None:
            if rule.state_code is not None:
                continue
            score = 0
        elif country_iso is None or rule.country_iso.upper() != country_iso.upper():
            continue
        elif rule.state_code is None:
            score = 1
        elif state_code is not None and rule.state_code.upper() == state_code.upper():
            score = 2
        else:
            continue

        if score > best_score:
            best, best_score = rule, score

    if best is not None:
        logger.debug("Tax %s resolved by rule %s", best.tax_id, best.id)
    return best
