"""Investment structure: works, fees, incentive and financed amount"""
from dataclasses import dataclass
from config.default_params import ARCHITECT_FEE_RATE
from .models import SimulationInput
from .rent import landlord_annual_base

NET_INVESTMENT_CLAMPED = "PRU + CIIC exceed the investment: net investment clamped to zero."

@dataclass(frozen=True)
class InvestmentBreakdown:
    """Uses and deductions leading to the amount financed by the main loan"""
    # Uses
    works: float
    fees_on_works: float
    fees_on_landlord_annual: float
    fees_total: float
    gross: float

    # Deductions
    ciic: float
    pru: float

    # Result
    net_raw: float
    net: float

    @property
    def clamped(self) -> bool:
        return self.net_raw < 0

def calculate_investment(inp: SimulationInput) -> InvestmentBreakdown:
    """
    Calculate gross and net investment

    Fees are charged on the works and on the landlord facial annual rent
    (no franchise). The CIIC incentive is based on the works only. The net
    investment is floored at zero.
    """
    works = inp.surface_m2 * inp.works_cost_per_m2

    fees_on_works = ARCHITECT_FEE_RATE * works
    fees_on_landlord = ARCHITECT_FEE_RATE * landlord_annual_base(inp)
    fees_total = fees_on_works + fees_on_landlord

    gross = works + fees_total

    ciic = works * inp.ciic_percent

    net_raw = gross - ciic - inp.pru_amount
    net = max(0.0, net_raw)

    return InvestmentBreakdown(
        works=works,
        fees_on_works=fees_on_works,
        fees_on_landlord_annual=fees_on_landlord,
        fees_total=fees_total,
        gross=gross,
        ciic=ciic,
        pru=inp.pru_amount,
        net_raw=net_raw,
        net=net
    )
