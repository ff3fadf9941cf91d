import math
from typing import Optional
from config.default_params import ORANGE_BAND

def break_even_occupancy(total_charges: float, rents_at_full: float) -> float:
    """Occupancy ratio at which tenant rents cover all charges (1 when rents at 100% are nil)"""
    return total_charges / rents_at_full if rents_at_full > 0 else 1.0

def required_practitioners(break_even: float, surface_m2: float, surface_per_practitioner: float) -> int:
    """Practitioners needed to fill the break-even share of the surface"""
    if surface_per_practitioner <= 0:
        return 0
    quotient = break_even * surface_m2 / surface_per_practitioner
    if not math.isfinite(quotient):
        return 0
    return math.ceil(quotient)

def avg_rent_per_m2_per_month(total_tenant_rents: float, surface_m2: float) -> float:
    if surface_m2 <= 0:
        return 0.0
    return total_tenant_rents / (surface_m2 * 12)

def rent_to_debt_ratio(total_tenant_rents: float, total_annuities: float) -> Optional[float]:
    """Tenant rents over debt service, None when there is no debt service"""
    return total_tenant_rents / total_annuities if total_annuities > 0 else None

def kpi_color(cash_flow: float, total_tenant_rents: float) -> str:
    """
    Traffic-light class for the cash flow

    green: positive cash flow
    orange: deficit smaller than 5% of tenant rents
    red: anything else
    """
    if cash_flow > 0:
        return "green"
    threshold = ORANGE_BAND * total_tenant_rents
    if abs(cash_flow) < threshold:
        return "orange"
    return "red"
