"""
Product rules for DepositLab.

Each product ('fd', 'fd_plus', 'rd') is a rule object implementing
``IProductRule``: live valuation, forward projection, historical series,
calculator quote and tenure presets. Importing this package registers the
default rules so ``resolve_rule`` can dispatch on an investment's type.
"""

from .fd import RuleFixedDeposit
from .fd_plus import RuleFdPlus
from .rd import RuleRecurringDeposit
from .registry import register_defaults

# Register all default rules when module is imported
register_defaults()

__all__ = [
    "RuleFixedDeposit",
    "RuleFdPlus",
    "RuleRecurringDeposit",
    "register_defaults",
]
