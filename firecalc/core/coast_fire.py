"""Coast FIRE engine.

The Coast FIRE number is the amount that, left alone at the real return rate,
grows into the regular FIRE number (annualSpending / withdrawalRate) by
retirement. Everything here is expressed in today's dollars, so growth uses
the real rate (investmentRate - inflationRate).
"""

from __future__ import annotations

from typing import List, Optional, Union

from loguru import logger

from firecalc.core.compounding import MONTHS_PER_YEAR, future_value_monthly, monthly_needed
from firecalc.domain.validation import Validator
from firecalc.schemas.coast_fire import (
    CoastFireInputs,
    CoastFireResult,
    GrowthPoint,
    ScenarioSet,
)

DEFAULT_SCENARIO_MIN_RATE = 0.01
DEFAULT_SCENARIO_MAX_RATE = 0.20


def validate_inputs(inputs: CoastFireInputs, require_range: bool = False) -> None:
    v = Validator()
    v.between(inputs.currentAge, "currentAge", 18, 80, "Age must be between 18 and 80")
    v.check(
        inputs.retirementAge > inputs.currentAge,
        "retirementAge",
        "Retirement age must be greater than current age",
    )
    v.between(inputs.retirementAge, "retirementAge", high=120)
    v.check(inputs.annualSpending > 0, "annualSpending", "Annual spending must be greater than 0")
    v.check(inputs.currentAssets >= 0, "currentAssets", "Current assets cannot be negative")
    v.check(
        inputs.monthlyContributions >= 0,
        "monthlyContributions",
        "Monthly contributions cannot be negative",
    )
    v.between(inputs.investmentRate, "investmentRate", 0.0, 1.0)
    v.between(inputs.inflationRate, "inflationRate", -0.5, 0.5)
    v.check(
        0 < inputs.withdrawalRate <= 1,
        "withdrawalRate",
        "Withdrawal rate must be greater than 0 and at most 1",
    )
    if inputs.rateRange is not None:
        v.between(inputs.rateRange, "rateRange", 0.0, 0.2)
    elif require_range:
        v.check(False, "rateRange", "Rate range is required for scenario analysis")
    v.raise_if_any()


def coast_fire_at(
    annual_spending: float,
    withdrawal_rate: float,
    real_return_rate: float,
    years_remaining: int,
) -> float:
    """Assets needed today to coast into the FIRE number `years_remaining` years out."""
    return annual_spending / (withdrawal_rate * (1 + real_return_rate) ** years_remaining)


def years_to_coast_fire(inputs: CoastFireInputs, real_return_rate: float) -> Optional[int]:
    """First whole year at which contributed-and-grown assets meet that year's
    Coast FIRE requirement.

    Both sides move: assets grow with contributions while the requirement
    rises toward the regular FIRE number as retirement gets closer. The search
    runs at most yearsToRetirement + 1 checks and returns None when the target
    is never met before retirement.
    """
    years_to_retirement = inputs.retirementAge - inputs.currentAge
    monthly_rate = real_return_rate / MONTHS_PER_YEAR
    value = inputs.currentAssets

    for year in range(years_to_retirement + 1):
        required = coast_fire_at(
            inputs.annualSpending,
            inputs.withdrawalRate,
            real_return_rate,
            years_to_retirement - year,
        )
        if value >= required:
            return year

        # contribution lands first, then the month's growth
        for _ in range(MONTHS_PER_YEAR):
            value += inputs.monthlyContributions
            value *= 1 + monthly_rate

    return None


def project_growth(inputs: CoastFireInputs, real_return_rate: float) -> List[GrowthPoint]:
    """Projected net worth and Coast FIRE requirement for each age up to retirement."""
    points: List[GrowthPoint] = []
    for age in range(inputs.currentAge, inputs.retirementAge + 1):
        months = (age - inputs.currentAge) * MONTHS_PER_YEAR
        points.append(
            GrowthPoint(
                age=age,
                netWorth=future_value_monthly(
                    inputs.currentAssets,
                    inputs.monthlyContributions,
                    real_return_rate,
                    months,
                ),
                coastFireRequired=coast_fire_at(
                    inputs.annualSpending,
                    inputs.withdrawalRate,
                    real_return_rate,
                    inputs.retirementAge - age,
                ),
            )
        )
    return points


def compute_single(inputs: CoastFireInputs) -> CoastFireResult:
    validate_inputs(inputs)

    years_to_retirement = inputs.retirementAge - inputs.currentAge
    real_return_rate = inputs.investmentRate - inputs.inflationRate

    regular_fire_number = inputs.annualSpending / inputs.withdrawalRate
    coast_fire_number = coast_fire_at(
        inputs.annualSpending, inputs.withdrawalRate, real_return_rate, years_to_retirement
    )
    achieved = inputs.currentAssets >= coast_fire_number

    years_needed: Optional[int] = None
    monthly = 0.0
    if not achieved:
        # zero contributions leave nothing to search with; reported as "never"
        if inputs.monthlyContributions > 0:
            years_needed = years_to_coast_fire(inputs, real_return_rate)
        monthly = monthly_needed(
            inputs.currentAssets, regular_fire_number, years_to_retirement, real_return_rate
        )

    result = CoastFireResult(
        investmentRate=inputs.investmentRate,
        regularFireNumber=regular_fire_number,
        coastFireNumber=coast_fire_number,
        currentProgress=inputs.currentAssets / coast_fire_number * 100,
        yearsToCoastFire=years_needed,
        monthlyNeeded=monthly,
        yearsToRetirement=years_to_retirement,
        isCoastFireAchieved=achieved,
        projectedGrowth=project_growth(inputs, real_return_rate),
    )
    logger.debug(
        f"coast fire at {inputs.investmentRate:.2%}: target {coast_fire_number:,.0f}, "
        f"achieved={achieved}, years={years_needed}"
    )
    return result


def scenario_rates(
    investment_rate: float,
    rate_range: float,
    min_rate: float = DEFAULT_SCENARIO_MIN_RATE,
    max_rate: float = DEFAULT_SCENARIO_MAX_RATE,
) -> tuple[float, float, float]:
    """(conservative, expected, optimistic) returns; the outer two are clamped."""
    return (
        max(min_rate, investment_rate - rate_range),
        investment_rate,
        min(max_rate, investment_rate + rate_range),
    )


def compute_scenarios(
    inputs: CoastFireInputs,
    min_rate: float = DEFAULT_SCENARIO_MIN_RATE,
    max_rate: float = DEFAULT_SCENARIO_MAX_RATE,
) -> ScenarioSet:
    validate_inputs(inputs, require_range=True)
    conservative, expected, optimistic = scenario_rates(
        inputs.investmentRate, inputs.rateRange, min_rate, max_rate
    )
    return ScenarioSet(
        conservative=compute_single(inputs.model_copy(update={"investmentRate": conservative})),
        expected=compute_single(inputs.model_copy(update={"investmentRate": expected})),
        optimistic=compute_single(inputs.model_copy(update={"investmentRate": optimistic})),
    )


def compute(
    inputs: CoastFireInputs,
    min_rate: float = DEFAULT_SCENARIO_MIN_RATE,
    max_rate: float = DEFAULT_SCENARIO_MAX_RATE,
) -> Union[CoastFireResult, ScenarioSet]:
    """Scenario set when range analysis is switched on, otherwise a single result."""
    if inputs.enableRangeAnalysis:
        return compute_scenarios(inputs, min_rate, max_rate)
    return compute_single(inputs)


__all__ = [
    "coast_fire_at",
    "compute",
    "compute_scenarios",
    "compute_single",
    "project_growth",
    "scenario_rates",
    "validate_inputs",
    "years_to_coast_fire",
]
