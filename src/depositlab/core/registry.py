"""
Product rule registry: the single dispatch point from ``type`` to behaviour.
"""

from __future__ import annotations

from .errors import UnsupportedProductTypeError
from .interfaces import IProductRule
from .kinds import ProductType

ProductRegistry: dict[ProductType, IProductRule] = {}


def resolve_rule(kind, investment_id: str | None = None) -> IProductRule:
    """
    Look up the rule for a product discriminant.

    Args:
        kind: ProductType or raw wire string
        investment_id: Used only to enrich the error message

    Raises:
        UnsupportedProductTypeError: If ``kind`` is not a registered product
    """
    product = ProductType.parse(kind)
    if product is None or product not in ProductRegistry:
        raise UnsupportedProductTypeError(kind, investment_id)
    return ProductRegistry[product]
