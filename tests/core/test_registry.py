"""
Tests for product rule dispatch.
"""

import pytest

from depositlab.core.errors import DepositLabError, UnsupportedProductTypeError
from depositlab.core.interfaces import IProductRule
from depositlab.core.kinds import ProductType
from depositlab.core.registry import ProductRegistry, resolve_rule
from depositlab.products import RuleFdPlus, RuleFixedDeposit, RuleRecurringDeposit


class TestProductRegistry:
    def test_every_product_registered(self):
        """The closed product set and the registry stay aligned."""
        assert set(ProductRegistry) == set(ProductType)

    @pytest.mark.parametrize(
        "kind, cls",
        [
            ("fd", RuleFixedDeposit),
            ("fd_plus", RuleFdPlus),
            ("fd-plus", RuleFdPlus),
            (ProductType.RD, RuleRecurringDeposit),
        ],
    )
    def test_resolve(self, kind, cls):
        assert isinstance(resolve_rule(kind), cls)

    def test_rules_satisfy_protocol(self):
        for rule in ProductRegistry.values():
            assert isinstance(rule, IProductRule)

    def test_unknown_type_raises(self):
        with pytest.raises(UnsupportedProductTypeError) as exc:
            resolve_rule("bond", "inv-9")
        assert exc.value.product_type == "bond"
        assert exc.value.investment_id == "inv-9"
        assert "[Investment inv-9]" in str(exc.value)

    def test_error_hierarchy(self):
        with pytest.raises(DepositLabError):
            resolve_rule("")
        with pytest.raises(ValueError):
            resolve_rule(None)
