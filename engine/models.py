from dataclasses import dataclass, field, asdict, replace
from typing import Optional, Tuple
from .metrics import kpi_color

TRANCHE_KEYS = ("low", "mid", "high")

@dataclass(frozen=True)
class Tranche:
    rent_per_m2_per_month: float  # TTC
    share_percent: float          # 0..100
    occupancy_percent: float      # 50..100

@dataclass(frozen=True)
class Tenants:
    low: Tranche = Tranche(40.0, 40.0, 80.0)
    mid: Tranche = Tranche(50.0, 40.0, 80.0)
    high: Tranche = Tranche(60.0, 20.0, 80.0)

    def __getitem__(self, key: str) -> Tranche:
        if key not in TRANCHE_KEYS:
            raise KeyError(key)
        return getattr(self, key)

    def items(self):
        return [(k, getattr(self, k)) for k in TRANCHE_KEYS]

@dataclass(frozen=True)
class SimulationInput:
    surface_m2: float = 450.0
    works_cost_per_m2: float = 1500.0

    main_loan_rate: float = 0.035   # 3.5%
    main_loan_years: int = 7

    # Secondary loan (PRU), rate and term only read when the amount is > 0
    pru_amount: float = 0.0
    pru_rate: float = 0.02
    pru_years: int = 15

    ciic_percent: float = 0.0       # 0..0.30, applied to works

    landlord_base_rent_per_m2_per_month: float = 12.0
    landlord_adjust_pct: float = 0.0  # form-side adjustment, already folded into the base rent
    landlord_franchise_months: int = 6
    landlord_surface_m2: float = 550.0

    tenants: Tenants = field(default_factory=Tenants)

    charges_non_recup_per_m2_per_year: float = 0.0
    indexation_percent: float = 0.02  # kept for later years

    practitioners_max: int = 18
    surface_per_practitioner: float = 25.0

    def with_tranche(self, key: str, **changes) -> "SimulationInput":
        """Return a copy with one tranche's fields replaced"""
        tranche = replace(self.tenants[key], **changes)
        return replace(self, tenants=replace(self.tenants, **{key: tranche}))

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationInput":
        """
        Build an input snapshot from a plain dict (e.g. form state or asdict output)

        Missing top-level keys fall back to the defaults. A tenants mapping,
        when given, must provide all three tranches.
        """
        values = dict(data)
        tenants = values.pop("tenants", None)
        if tenants is not None and not isinstance(tenants, Tenants):
            missing = [k for k in TRANCHE_KEYS if k not in tenants]
            if missing:
                raise ValueError(f"Missing tranches: {', '.join(missing)}")
            tenants = Tenants(**{
                k: tenants[k] if isinstance(tenants[k], Tranche) else Tranche(**tenants[k])
                for k in TRANCHE_KEYS
            })
        if tenants is not None:
            values["tenants"] = tenants
        return cls(**values)

@dataclass(frozen=True)
class Kpis:
    investment_gross: float
    investment_net: float
    total_annuities: float
    annuity_main: float
    annuity_pru: float
    total_tenant_rents: float
    landlord_paid: float
    landlord_annual_base: float
    charges: float
    cash_flow: float
    break_even_occupancy: float      # ratio, may exceed 1
    required_practitioners: int
    avg_rent_per_m2_per_month: float
    rent_to_debt_ratio: Optional[float]  # None when there is no debt service
    architect_fees_total: float
    architect_fees_on_works: float
    architect_fees_on_landlord_annual: float
    ciic_amount: float
    total_resources: float
    total_charges: float
    total_works: float

@dataclass(frozen=True)
class SimulationResult:
    kpis: Kpis
    warnings: Tuple[str, ...] = ()
    errors: Tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def color(self) -> str:
        return kpi_color(self.kpis.cash_flow, self.kpis.total_tenant_rents)

def default_input() -> SimulationInput:
    return SimulationInput()
