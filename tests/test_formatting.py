"""Test French display formatting"""
from utils.formatting import fr_currency, fr_percent, fr_decimal, NARROW_NBSP, NBSP, PLACEHOLDER

def test_currency_rounds_to_unit():
    assert fr_currency(47_501.4) == f"47{NARROW_NBSP}501{NBSP}€"
    assert fr_currency(735_336.0) == f"735{NARROW_NBSP}336{NBSP}€"
    assert fr_currency(12.6) == f"13{NBSP}€"

def test_currency_negative():
    assert fr_currency(-1_234.6) == f"-1{NARROW_NBSP}235{NBSP}€"

def test_percent_one_decimal():
    assert fr_percent(0.6167) == f"61,7{NBSP}%"
    assert fr_percent(1.0) == f"100,0{NBSP}%"

def test_decimal_comma():
    assert fr_decimal(38.4) == "38,40"
    assert fr_decimal(1234.5, 1) == f"1{NARROW_NBSP}234,5"

def test_missing_values():
    assert fr_currency(None) == PLACEHOLDER
    assert fr_currency(float("nan")) == PLACEHOLDER
    assert fr_percent(float("inf")) == PLACEHOLDER
    assert fr_decimal(None) == PLACEHOLDER
