"""Input checks reported as errors and warnings instead of exceptions"""
from typing import List
from config.default_params import SHARE_SUM_TOLERANCE, OCCUPANCY_MIN, OCCUPANCY_MAX
from .models import SimulationInput

SHARE_SUM_ERROR = "Low/Mid/High share percentages must sum to 100%."

def tranche_share_sum(inp: SimulationInput) -> float:
    return sum(t.share_percent for _, t in inp.tenants.items())

def validate_shares(inp: SimulationInput) -> List[str]:
    """Errors for share percentages that do not add up to 100 (±0.1)"""
    errors = []
    if abs(tranche_share_sum(inp) - 100.0) > SHARE_SUM_TOLERANCE:
        errors.append(SHARE_SUM_ERROR)
    return errors

def validate_occupancy(inp: SimulationInput) -> List[str]:
    """One combined warning naming every tranche with occupancy outside 50–100%"""
    out_of_range = [
        k for k, t in inp.tenants.items()
        if not (OCCUPANCY_MIN <= t.occupancy_percent <= OCCUPANCY_MAX)
    ]
    if not out_of_range:
        return []
    return [
        f"Occupancy outside {OCCUPANCY_MIN:.0f}–{OCCUPANCY_MAX:.0f}% for: {', '.join(out_of_range)}"
    ]

def validate_input(inp: SimulationInput):
    """
    Run all input checks

    Returns: (warnings, errors)
    """
    return validate_occupancy(inp), validate_shares(inp)
