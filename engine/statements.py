"""Year-1 breakdown table: investment, resources and charges"""
import pandas as pd
from .models import SimulationInput, SimulationResult
from .rent import tranche_rents

COLUMNS = ["section", "item", "amount", "is_total"]

def build_breakdown(inp: SimulationInput, result: SimulationResult) -> pd.DataFrame:
    """
    Build the breakdown shown under the KPI band

    Amounts are left unrounded; formatting is up to the caller. Subtotal
    rows carry is_total=True so they can be skipped when summing.
    """
    k = result.kpis
    rows = [
        # --- Investment ---
        ("INVESTMENT", "Works", k.total_works, False),
        ("INVESTMENT", "Architect fees (8% of works)", k.architect_fees_on_works, False),
        ("INVESTMENT", "Commission (8% of landlord annual rent)", k.architect_fees_on_landlord_annual, False),
        ("INVESTMENT", "Gross investment", k.investment_gross, True),
        ("INVESTMENT", "CIIC", -k.ciic_amount, False),
        ("INVESTMENT", "PRU", -inp.pru_amount, False),
        ("INVESTMENT", "Net investment", k.investment_net, True),
    ]

    # --- Resources ---
    for key, rent in tranche_rents(inp).items():
        rows.append(("RESOURCES", f"Tenant rents ({key})", rent, False))
    rows.append(("RESOURCES", "Total resources", k.total_resources, True))

    # --- Charges ---
    rows += [
        ("CHARGES", "Landlord rent paid", k.landlord_paid, False),
        ("CHARGES", "Non-recoverable charges", k.charges, False),
        ("CHARGES", "Loan annuities", k.total_annuities, False),
        ("CHARGES", "Total charges", k.total_charges, True),
        ("RESULT", "Cash flow", k.cash_flow, True),
    ]

    return pd.DataFrame(rows, columns=COLUMNS)

def section_total(df: pd.DataFrame, section: str, exclude_totals: bool = True) -> float:
    """Sum of a section's line items, skipping the subtotal rows"""
    rows = df[df["section"] == section]
    if exclude_totals:
        rows = rows[~rows["is_total"]]
    return float(rows["amount"].sum())
