"""Default parameters for the medical office financial model."""

# Business constants
ARCHITECT_FEE_RATE = 0.08       # on works and on the landlord facial annual rent
SHARE_SUM_TOLERANCE = 0.1       # percentage points
OCCUPANCY_MIN = 50.0
OCCUPANCY_MAX = 100.0
FRANCHISE_MAX_MONTHS = 24
ORANGE_BAND = 0.05              # share of tenant rents under which a deficit is "orange"
LANDLORD_ADJUST_MAX_PCT = 15.0

# Widget bounds for the input form: (min, max, step)
FORM_BOUNDS = {
    'works_cost_per_m2': (700.0, 1500.0, 10.0),
    'main_loan_rate_pct': (3.0, 6.0, 0.01),
    'main_loan_years': (7, 12, 1),
    'pru_amount': (0.0, None, 1000.0),
    'pru_rate_pct': (0.0, 10.0, 0.01),
    'pru_years': (1, 30, 1),
    'ciic_pct': (0.0, 30.0, 0.5),
    'landlord_base_rent': (0.0, None, 0.1),
    'landlord_adjust_pct': (-LANDLORD_ADJUST_MAX_PCT, LANDLORD_ADJUST_MAX_PCT, 1.0),
    'landlord_franchise_months': (0, FRANCHISE_MAX_MONTHS, 1),
    'tenant_rent': (0.0, None, 0.5),
    'tenant_share': (0.0, 100.0, 1.0),
    'tenant_occupancy': (OCCUPANCY_MIN, OCCUPANCY_MAX, 1.0),
    'charges_non_recup': (0.0, None, 1.0),
    'indexation_pct': (0.0, None, 0.1),
    'practitioners_max': (1, None, 1),
    'surface_per_practitioner': (1.0, None, 1.0),
}
