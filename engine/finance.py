"""Financial calculations for loan annuities"""

def amortize_annual(principal: float, rate: float, years: float) -> float:
    """
    Constant annual payment that fully amortizes a loan

    Args:
        principal: Amount borrowed
        rate: Annual interest rate (e.g., 0.035 for 3.5%)
        years: Term in years

    Returns:
        Annual annuity. Zero when there is nothing to borrow, the principal
        itself when the term is not positive.
    """
    if principal <= 0:
        return 0.0
    if years <= 0:
        return principal
    if rate == 0:
        return principal / years
    return rate * principal / (1 - (1 + rate) ** (-years))
