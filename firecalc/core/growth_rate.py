"""Compound annual growth rate between two amounts."""

import math
from typing import List

from loguru import logger

from firecalc.core.compounding import MONTHS_PER_YEAR
from firecalc.domain.validation import FieldError, InputValidationError, Validator
from firecalc.schemas.growth_rate import GrowthBand, GrowthInputs, GrowthResult

EXCEPTIONAL_RATE = 0.15
IMPLAUSIBLE_RATE = 10.0  # 1000% a year


def validate_inputs(inputs: GrowthInputs) -> None:
    v = Validator()
    v.check(inputs.startingAmount > 0, "startingAmount", "Starting amount must be greater than zero")
    v.check(inputs.endingAmount > 0, "endingAmount", "Ending amount must be greater than zero")
    v.check(inputs.numberOfYears > 0, "numberOfYears", "Number of years must be greater than zero")
    v.check(inputs.numberOfYears <= 100, "numberOfYears", "Number of years cannot exceed 100")
    v.raise_if_any()


def annual_rate(growth_ratio: float, years: float) -> float:
    """Constant yearly rate turning 1 into `growth_ratio` over `years` years.

    Worked in log space; a rate too large for a float is reported against
    numberOfYears rather than raised as an arithmetic error.
    """
    try:
        rate = math.expm1(math.log(growth_ratio) / years)
    except OverflowError:
        rate = math.inf
    # the rate is reported in percent, so that has to stay finite too
    if not math.isfinite(rate * 100):
        raise InputValidationError(
            [FieldError("numberOfYears", "Growth over this period is too large to compute")]
        )
    return rate


def classify_growth(rate_pct: float) -> GrowthBand:
    """Band an annual growth rate given in percent."""
    if rate_pct < 0:
        return GrowthBand.NEGATIVE
    if rate_pct <= 3:
        return GrowthBand.CONSERVATIVE
    if rate_pct <= 7:
        return GrowthBand.MODERATE
    if rate_pct <= 12:
        return GrowthBand.STRONG
    return GrowthBand.EXCEPTIONAL


def compute(inputs: GrowthInputs) -> GrowthResult:
    validate_inputs(inputs)

    annual = annual_rate(inputs.endingAmount / inputs.startingAmount, inputs.numberOfYears)
    monthly = math.expm1(math.log1p(annual) / MONTHS_PER_YEAR)

    warnings: List[str] = []
    if abs(annual) > IMPLAUSIBLE_RATE:
        warnings.append(
            "This represents extremely high growth (>1000% annually). Please verify your inputs."
        )
        logger.info(f"implausible growth rate {annual:.0%} from {inputs.model_dump()}")

    return GrowthResult(
        annualGrowthRate=annual * 100,
        totalGrowthPercentage=(inputs.endingAmount - inputs.startingAmount)
        / inputs.startingAmount
        * 100,
        totalDollarChange=inputs.endingAmount - inputs.startingAmount,
        monthlyGrowthRate=monthly * 100,
        isPositiveGrowth=annual > 0,
        isExceptionalGrowth=abs(annual) > EXCEPTIONAL_RATE,
        classification=classify_growth(annual * 100),
        warnings=warnings,
    )
