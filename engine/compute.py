import logging
import math
from .models import SimulationInput, SimulationResult, Kpis
from .validation import validate_input
from .capital import calculate_investment, NET_INVESTMENT_CLAMPED
from .finance import amortize_annual
from .rent import (
    tenant_rent_at_occupancy, landlord_annual_base, landlord_rent_paid,
    non_recoverable_charges
)
from .metrics import (
    break_even_occupancy, required_practitioners, avg_rent_per_m2_per_month,
    rent_to_debt_ratio
)

logger = logging.getLogger(__name__)

BREAK_EVEN_ABOVE_FULL = (
    "Occupancy threshold exceeds 100%: model not profitable under current assumptions."
)
PRACTITIONERS_ABOVE_MAX = "Required practitioners exceed the maximum capacity."
SURFACE_PER_PRACTITIONER_INVALID = "Surface per practitioner is too small to count practitioners."

def simulate(inp: SimulationInput) -> SimulationResult:
    """
    Compute year-1 KPIs for a medical office project

    Range problems are reported in the result's warnings and errors; the
    calculation always runs to completion with the values given.

    Args:
        inp: Immutable input snapshot

    Returns:
        SimulationResult with the flat KPI record, warnings and errors
    """
    warnings, errors = validate_input(inp)

    # Investment
    inv = calculate_investment(inp)
    if inv.clamped:
        warnings.append(NET_INVESTMENT_CLAMPED)

    # Debt service: PRU only counts when drawn
    annuity_main = amortize_annual(inv.net, inp.main_loan_rate, inp.main_loan_years)
    annuity_pru = (
        amortize_annual(inp.pru_amount, inp.pru_rate, inp.pru_years)
        if inp.pru_amount > 0 else 0.0
    )
    total_annuities = annuity_main + annuity_pru

    # Resources and charges
    tenant_rents = tenant_rent_at_occupancy(inp)
    landlord_paid = landlord_rent_paid(inp)
    charges = non_recoverable_charges(inp)

    total_charges = landlord_paid + charges + total_annuities
    cash_flow = tenant_rents - total_charges

    # Thresholds
    rents_at_full = tenant_rent_at_occupancy(inp, 1.0)
    break_even = break_even_occupancy(total_charges, rents_at_full)
    if break_even > 1:
        warnings.append(BREAK_EVEN_ABOVE_FULL)

    practitioners = required_practitioners(break_even, inp.surface_m2, inp.surface_per_practitioner)
    if inp.surface_per_practitioner <= 0 or not math.isfinite(
        break_even * inp.surface_m2 / inp.surface_per_practitioner
    ):
        warnings.append(SURFACE_PER_PRACTITIONER_INVALID)
    elif practitioners > inp.practitioners_max:
        warnings.append(PRACTITIONERS_ABOVE_MAX)

    kpis = Kpis(
        investment_gross=inv.gross,
        investment_net=inv.net,
        total_annuities=total_annuities,
        annuity_main=annuity_main,
        annuity_pru=annuity_pru,
        total_tenant_rents=tenant_rents,
        landlord_paid=landlord_paid,
        landlord_annual_base=landlord_annual_base(inp),
        charges=charges,
        cash_flow=cash_flow,
        break_even_occupancy=break_even,
        required_practitioners=practitioners,
        avg_rent_per_m2_per_month=avg_rent_per_m2_per_month(tenant_rents, inp.surface_m2),
        rent_to_debt_ratio=rent_to_debt_ratio(tenant_rents, total_annuities),
        architect_fees_total=inv.fees_total,
        architect_fees_on_works=inv.fees_on_works,
        architect_fees_on_landlord_annual=inv.fees_on_landlord_annual,
        ciic_amount=inv.ciic,
        total_resources=tenant_rents,
        total_charges=total_charges,
        total_works=inv.works,
    )

    for msg in errors:
        logger.debug("simulate error: %s", msg)
    for msg in warnings:
        logger.debug("simulate warning: %s", msg)
    logger.debug(
        "simulate: cash_flow=%.2f break_even=%.4f annuities=%.2f",
        cash_flow, break_even, total_annuities
    )

    return SimulationResult(kpis=kpis, warnings=tuple(warnings), errors=tuple(errors))
