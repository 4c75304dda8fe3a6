"""
Product rule registration for DepositLab.
"""

from depositlab.core.kinds import ProductType
from depositlab.core.registry import ProductRegistry

from .fd import RuleFixedDeposit
from .fd_plus import RuleFdPlus
from .rd import RuleRecurringDeposit


def register_defaults():
    """
    Register the built-in product rules in the global registry.

    Registered Rules:
        - 'fd': Fixed Deposit with live accrual and lock-in
        - 'fd_plus': 20-month FD+ fixed plan
        - 'rd': Recurring Deposit

    Note:
        Called automatically when ``depositlab.products`` is imported.
    """
    ProductRegistry[ProductType.FD] = RuleFixedDeposit()
    ProductRegistry[ProductType.FD_PLUS] = RuleFdPlus()
    ProductRegistry[ProductType.RD] = RuleRecurringDeposit()
