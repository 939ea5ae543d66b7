"""Compound-growth helpers shared by the FIRE engines."""

MONTHS_PER_YEAR = 12


def annuity_factor(monthly_rate: float, months: int) -> float:
    """Future value of 1 paid at the end of each month for `months` months."""
    if months <= 0:
        return 0.0
    if monthly_rate == 0:
        return float(months)
    return ((1 + monthly_rate) ** months - 1) / monthly_rate


def future_value_monthly(
    principal: float,
    monthly_contribution: float,
    annual_rate: float,
    months: int,
) -> float:
    """Principal compounded monthly plus an ordinary annuity of contributions."""
    monthly_rate = annual_rate / MONTHS_PER_YEAR
    value = principal * (1 + monthly_rate) ** months
    if monthly_contribution > 0 and months > 0:
        value += monthly_contribution * annuity_factor(monthly_rate, months)
    return value


def future_value_annual(
    principal: float,
    annual_contribution: float,
    annual_rate: float,
    years: int,
) -> float:
    """Grow for `years` years, adding the contribution after each year's growth."""
    value = principal
    for _ in range(years):
        value = value * (1 + annual_rate) + annual_contribution
    return value


def monthly_needed(
    current_amount: float,
    target_amount: float,
    years_available: int,
    annual_rate: float,
) -> float:
    """Monthly contribution that closes the gap between current_amount grown
    for `years_available` years and target_amount.

    Returns 0 when there is no time left or growth alone already gets there.
    """
    if years_available <= 0:
        return 0.0

    monthly_rate = annual_rate / MONTHS_PER_YEAR
    months = years_available * MONTHS_PER_YEAR
    deficit = target_amount - current_amount * (1 + monthly_rate) ** months
    if deficit <= 0:
        return 0.0

    return max(0.0, deficit / annuity_factor(monthly_rate, months))
