"""Test the annual annuity formula"""
import pytest
from engine.finance import amortize_annual

@pytest.mark.parametrize("principal", [0.0, -1.0, -250_000.0])
def test_no_principal_no_payment(principal):
    """Nothing borrowed means nothing to repay"""
    assert amortize_annual(principal, 0.035, 7) == 0.0
    assert amortize_annual(principal, 0.0, 0) == 0.0

@pytest.mark.parametrize("years", [0, -3])
def test_non_positive_term_returns_principal(years):
    """Degenerate term repays the whole principal at once"""
    assert amortize_annual(50_000.0, 0.035, years) == 50_000.0

def test_zero_rate_is_straight_line():
    assert abs(amortize_annual(1000, 0, 5) - 200.0) < 1e-9

def test_positive_annuity_with_rate():
    ann = amortize_annual(100_000, 0.035, 7)
    assert ann > 0
    # More than straight-line, less than one-year repayment
    assert 100_000 / 7 < ann < 100_000

def test_annuity_repays_principal():
    """Discounted payments add up to the amount borrowed"""
    principal, rate, years = 735_336.0, 0.035, 7
    ann = amortize_annual(principal, rate, years)
    pv = sum(ann / (1 + rate) ** t for t in range(1, years + 1))
    assert abs(pv - principal) < 1e-6

def test_known_value():
    # 100k at 3.5% over 7 years
    assert abs(amortize_annual(100_000, 0.035, 7) - 16_354.0) < 5.0
