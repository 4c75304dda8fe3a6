"""
Smoke tests to verify basic imports and functionality.
"""


def test_import_depositlab():
    """Test that we can import the main package."""
    import depositlab

    assert hasattr(depositlab, "__version__")
    assert depositlab.__version__ == "0.1.0"


def test_import_core_components():
    from depositlab import (
        Investment,
        ProductType,
        UnsupportedProductTypeError,
        Valuation,
        ValuationSnapshot,
        accrue,
        history,
        project,
        value,
    )

    assert Investment is not None
    assert ValuationSnapshot is not None
    assert callable(value)
    assert callable(project)
    assert callable(history)
    assert callable(accrue)
    assert issubclass(UnsupportedProductTypeError, ValueError)
    assert Valuation is not None
    assert len(list(ProductType)) == 3


def test_basic_valuation():
    """Value a small FD end to end from a JSON-shaped dict."""
    from depositlab import snapshot

    snap = snapshot(
        {
            "id": "smoke",
            "type": "fd",
            "principalAmount": 1000,
            "interestRate": 0.01,
            "activationDate": "2025-01-01",
        },
        "2025-01-01",
    )
    assert snap.principal_invested == 1000
    assert snap.total_gain == 0
