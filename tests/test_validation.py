"""Test input checks: share sum errors and occupancy warnings"""
import pytest
from engine.models import default_input
from engine.validation import (
    validate_shares, validate_occupancy, validate_input, tranche_share_sum, SHARE_SUM_ERROR
)

def test_default_shares_sum_to_100():
    inp = default_input()
    assert tranche_share_sum(inp) == 100
    assert validate_shares(inp) == []

@pytest.mark.parametrize("high_share, has_error", [
    (20.05, False),   # within ±0.1
    (19.95, False),
    (20.2, True),
    (10.0, True),
])
def test_share_tolerance(high_share, has_error):
    inp = default_input().with_tranche("high", share_percent=high_share)
    assert (validate_shares(inp) == [SHARE_SUM_ERROR]) is has_error

def test_occupancy_bounds_are_inclusive():
    inp = default_input().with_tranche("low", occupancy_percent=50).with_tranche("high", occupancy_percent=100)
    assert validate_occupancy(inp) == []

def test_one_combined_occupancy_warning():
    inp = (
        default_input()
        .with_tranche("low", occupancy_percent=40)
        .with_tranche("high", occupancy_percent=101)
    )
    warnings = validate_occupancy(inp)
    assert len(warnings) == 1
    assert "low" in warnings[0] and "high" in warnings[0]
    assert "mid" not in warnings[0]

def test_validate_input_returns_warnings_then_errors():
    inp = default_input().with_tranche("mid", share_percent=0, occupancy_percent=20)
    warnings, errors = validate_input(inp)
    assert len(warnings) == 1
    assert errors == [SHARE_SUM_ERROR]

def test_nan_occupancy_is_flagged():
    inp = default_input().with_tranche("mid", occupancy_percent=float("nan"))
    warnings = validate_occupancy(inp)
    assert len(warnings) == 1
    assert "mid" in warnings[0]
