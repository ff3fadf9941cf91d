"""Tenant and landlord rent calculation for year 1"""
from typing import Dict, Optional
from config.default_params import FRANCHISE_MAX_MONTHS
from .models import SimulationInput

def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))

def tranche_rents(inp: SimulationInput, occupancy_override: Optional[float] = None) -> Dict[str, float]:
    """
    Annual rent collected per tranche

    Args:
        inp: Input snapshot
        occupancy_override: Occupancy ratio (e.g. 1.0) applied to every
            tranche instead of its own occupancy

    Returns:
        Dict of tranche key -> annual rent
    """
    rents = {}
    for key, t in inp.tenants.items():
        occupancy = occupancy_override if occupancy_override is not None else t.occupancy_percent / 100.0
        area = inp.surface_m2 * t.share_percent / 100.0
        rents[key] = t.rent_per_m2_per_month * area * 12 * occupancy
    return rents

def tenant_rent_at_occupancy(inp: SimulationInput, occupancy_override: Optional[float] = None) -> float:
    """Total annual tenant rent"""
    return sum(tranche_rents(inp, occupancy_override).values())

def landlord_annual_base(inp: SimulationInput) -> float:
    """Landlord facial annual rent, before franchise"""
    return inp.landlord_base_rent_per_m2_per_month * inp.landlord_surface_m2 * 12

def landlord_rent_paid(inp: SimulationInput) -> float:
    """
    Landlord rent actually paid in year 1

    The franchise (free-rent months) is clamped to 0–24 months; beyond 12
    months the year-1 amount becomes a credit.
    """
    franchise = clamp(inp.landlord_franchise_months, 0, FRANCHISE_MAX_MONTHS)
    return landlord_annual_base(inp) * ((12 - franchise) / 12)

def non_recoverable_charges(inp: SimulationInput) -> float:
    return inp.charges_non_recup_per_m2_per_year * inp.surface_m2
