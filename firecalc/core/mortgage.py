"""Mortgage payment as a share of a growing income."""

from typing import Dict, List, Optional

from loguru import logger

from firecalc.domain.validation import Validator
from firecalc.schemas.mortgage import MortgageDataPoint, MortgageInputs, MortgageResult

MILESTONE_THRESHOLDS = (30, 25, 20)


def validate_inputs(inputs: MortgageInputs) -> None:
    v = Validator()
    v.between(
        inputs.netMonthlyIncome, "netMonthlyIncome", 1_000, 50_000,
        "Net monthly income must be between $1,000 and $50,000",
    )
    v.between(
        inputs.monthlyMortgagePayment, "monthlyMortgagePayment", 500, 20_000,
        "Monthly mortgage payment must be between $500 and $20,000",
    )
    v.check(
        inputs.monthlyMortgagePayment < inputs.netMonthlyIncome,
        "monthlyMortgagePayment",
        "Mortgage payment must be less than your net monthly income",
    )
    v.between(inputs.mortgageLength, "mortgageLength", 0, 100)
    v.between(inputs.salaryIncreaseRate, "salaryIncreaseRate", -0.5, 1.0)
    v.raise_if_any()


def compute(inputs: MortgageInputs) -> MortgageResult:
    validate_inputs(inputs)

    points: List[MortgageDataPoint] = []
    milestones: Dict[int, Optional[int]] = {threshold: None for threshold in MILESTONE_THRESHOLDS}

    for year in range(inputs.mortgageLength + 1):
        income = inputs.netMonthlyIncome * (1 + inputs.salaryIncreaseRate) ** year
        percentage = inputs.monthlyMortgagePayment / income * 100
        points.append(
            MortgageDataPoint(
                year=year,
                income=income,
                percentage=percentage,
                mortgagePayment=inputs.monthlyMortgagePayment,
            )
        )
        for threshold in MILESTONE_THRESHOLDS:
            if milestones[threshold] is None and percentage <= threshold:
                milestones[threshold] = year

    start, end = points[0], points[-1]
    logger.debug(
        f"mortgage burden {start.percentage:.1f}% -> {end.percentage:.1f}% over "
        f"{inputs.mortgageLength} years"
    )
    return MortgageResult(
        dataPoints=points,
        startPercentage=start.percentage,
        endPercentage=end.percentage,
        totalReduction=start.percentage - end.percentage,
        finalIncome=end.income,
        milestones=milestones,
    )
