"""Test the year-1 breakdown table"""
from dataclasses import replace

from engine.models import default_input
from engine.compute import simulate
from engine.statements import build_breakdown, section_total, COLUMNS
from engine.rent import tranche_rents

def test_breakdown_columns_and_sections():
    inp = default_input()
    df = build_breakdown(inp, simulate(inp))
    assert list(df.columns) == COLUMNS
    assert list(df["section"].unique()) == ["INVESTMENT", "RESOURCES", "CHARGES", "RESULT"]

def test_investment_lines_add_up():
    inp = replace(default_input(), ciic_percent=0.10, pru_amount=50_000)
    res = simulate(inp)
    df = build_breakdown(inp, res)
    # Works + fees - CIIC - PRU
    assert abs(section_total(df, "INVESTMENT") - res.kpis.investment_net) < 1e-6
    gross = df[df["item"] == "Gross investment"]["amount"].iloc[0]
    assert abs(gross - res.kpis.investment_gross) < 1e-6

def test_resources_per_tranche():
    inp = default_input()
    res = simulate(inp)
    df = build_breakdown(inp, res)
    assert abs(section_total(df, "RESOURCES") - res.kpis.total_resources) < 1e-6
    rents = tranche_rents(inp)
    assert abs(rents["low"] - 69_120.0) < 1e-6
    assert abs(rents["mid"] - 86_400.0) < 1e-6
    assert abs(rents["high"] - 51_840.0) < 1e-6

def test_charges_and_result():
    inp = replace(default_input(), charges_non_recup_per_m2_per_year=15)
    res = simulate(inp)
    df = build_breakdown(inp, res)
    assert abs(section_total(df, "CHARGES") - res.kpis.total_charges) < 1e-6
    cash_flow = df[df["section"] == "RESULT"]["amount"].iloc[0]
    assert cash_flow == res.kpis.cash_flow

def test_tranche_rents_at_full_occupancy():
    rents = tranche_rents(default_input(), 1.0)
    assert abs(sum(rents.values()) - 259_200.0) < 1e-6

def test_annuities_are_a_charge_line():
    """Loan annuities count in the charges sum; only subtotal rows are skipped"""
    inp = default_input()
    res = simulate(inp)
    df = build_breakdown(inp, res)
    charges = df[df["section"] == "CHARGES"]
    lines = charges[~charges["is_total"]]
    assert list(lines["item"]) == ["Landlord rent paid", "Non-recoverable charges", "Loan annuities"]
    assert res.kpis.total_annuities > 0
    expected = res.kpis.landlord_paid + res.kpis.charges + res.kpis.total_annuities
    assert abs(section_total(df, "CHARGES") - expected) < 1e-6

def test_subtotal_rows_flagged():
    inp = default_input()
    df = build_breakdown(inp, simulate(inp))
    totals = list(df[df["is_total"]]["item"])
    assert totals == ["Gross investment", "Net investment", "Total resources", "Total charges", "Cash flow"]
    # Including subtotals double counts
    assert section_total(df, "RESOURCES", exclude_totals=False) > section_total(df, "RESOURCES")
