"""Traditional FIRE engine: how long until the portfolio reaches
yearlySpending / safeWithdrawalRate."""

from __future__ import annotations

import math
from typing import List

from loguru import logger

from firecalc.core.compounding import MONTHS_PER_YEAR, future_value_annual
from firecalc.domain.validation import Validator
from firecalc.schemas.traditional_fire import (
    PortfolioPoint,
    TimeToFire,
    TraditionalFireInputs,
    TraditionalFireResult,
)

MAX_YEARS = 50
PROJECTION_TAIL_YEARS = 5


def validate_inputs(inputs: TraditionalFireInputs) -> None:
    v = Validator()
    v.between(
        inputs.yearlySpending, "yearlySpending", 15_000, 500_000,
        "Yearly spending must be between $15,000 and $500,000",
    )
    v.between(
        inputs.monthlyInvestments, "monthlyInvestments", 100, 50_000,
        "Monthly investments must be between $100 and $50,000",
    )
    v.between(
        inputs.currentInvestedAssets, "currentInvestedAssets", 0, 10_000_000,
        "Current invested assets must be between $0 and $10,000,000",
    )
    v.between(inputs.inflationRate, "inflationRate", -0.5, 0.5)
    v.between(inputs.expectedReturnRate, "expectedReturnRate", high=1.0)
    v.check(
        inputs.expectedReturnRate > inputs.inflationRate,
        "expectedReturnRate",
        "Expected return rate must be higher than inflation rate",
    )
    v.check(
        0 < inputs.safeWithdrawalRate <= 1,
        "safeWithdrawalRate",
        "Safe withdrawal rate must be greater than 0 and at most 1",
    )
    v.raise_if_any()


def time_to_fire(
    current_assets: float,
    monthly_investment: float,
    fire_number: float,
    real_return_rate: float,
    max_years: int = MAX_YEARS,
) -> TimeToFire:
    """Years until the portfolio reaches fire_number.

    Steps a year at a time (growth, then twelve months of contributions) for at
    most `max_years` years; past that the goal is reported as not achievable.
    The final year is replayed month by month to get a fractional answer.
    """
    if current_assets >= fire_number:
        return TimeToFire(years=0, months=0, totalMonths=0, achievable=True)

    annual_contribution = monthly_investment * MONTHS_PER_YEAR
    value = current_assets
    years = 0
    while value < fire_number and years < max_years:
        value = value * (1 + real_return_rate) + annual_contribution
        years += 1

    if years >= max_years:
        return TimeToFire(
            years=max_years,
            months=0,
            totalMonths=max_years * MONTHS_PER_YEAR,
            achievable=False,
        )

    value = future_value_annual(current_assets, annual_contribution, real_return_rate, years - 1)
    monthly_rate = real_return_rate / MONTHS_PER_YEAR
    months = 0
    while value < fire_number and months < MONTHS_PER_YEAR:
        value += monthly_investment
        value *= 1 + monthly_rate
        months += 1

    return TimeToFire(
        years=years - 1 + months / MONTHS_PER_YEAR,
        months=months,
        totalMonths=(years - 1) * MONTHS_PER_YEAR + months,
        achievable=True,
    )


def projection_data(
    inputs: TraditionalFireInputs,
    real_return_rate: float,
    fire_years: float,
    max_years: int = MAX_YEARS,
) -> List[PortfolioPoint]:
    """Year-end portfolio values, running a few years past FIRE (capped)."""
    last_year = math.floor(min(fire_years + PROJECTION_TAIL_YEARS, max_years))
    annual_contribution = inputs.monthlyInvestments * MONTHS_PER_YEAR

    points: List[PortfolioPoint] = []
    value = inputs.currentInvestedAssets
    for year in range(last_year + 1):
        points.append(PortfolioPoint(year=year, portfolioValue=value))
        value = value * (1 + real_return_rate) + annual_contribution
    return points


def compute(inputs: TraditionalFireInputs, max_years: int = MAX_YEARS) -> TraditionalFireResult:
    validate_inputs(inputs)

    real_return_rate = inputs.expectedReturnRate - inputs.inflationRate
    fire_number = inputs.yearlySpending / inputs.safeWithdrawalRate
    timeline = time_to_fire(
        inputs.currentInvestedAssets,
        inputs.monthlyInvestments,
        fire_number,
        real_return_rate,
        max_years,
    )

    if timeline.achievable:
        total_contributions = inputs.monthlyInvestments * timeline.totalMonths
        projected_value = fire_number
    else:
        total_contributions = inputs.monthlyInvestments * max_years * MONTHS_PER_YEAR
        projected_value = future_value_annual(
            inputs.currentInvestedAssets,
            inputs.monthlyInvestments * MONTHS_PER_YEAR,
            real_return_rate,
            max_years,
        )

    logger.debug(
        f"traditional fire: target {fire_number:,.0f}, {timeline.years:.2f} years, "
        f"achievable={timeline.achievable}"
    )
    return TraditionalFireResult(
        fireNumber=fire_number,
        timeToFire=timeline,
        currentProgress=inputs.currentInvestedAssets / fire_number * 100,
        monthlyRetirementIncome=inputs.yearlySpending / MONTHS_PER_YEAR,
        projectedPortfolioValue=projected_value,
        totalContributions=total_contributions,
        investmentGrowth=max(
            0.0, projected_value - inputs.currentInvestedAssets - total_contributions
        ),
        projectionData=projection_data(inputs, real_return_rate, timeline.years, max_years),
    )
