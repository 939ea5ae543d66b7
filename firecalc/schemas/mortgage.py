"""Data contracts for the mortgage burden calculator."""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MortgageInputs(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    netMonthlyIncome: float = Field(..., description="Take-home pay per month, 1,000 to 50,000.")
    monthlyMortgagePayment: float = Field(
        ..., description="Fixed payment, 500 to 20,000 and below netMonthlyIncome."
    )
    mortgageLength: int = Field(..., description="Term in years.")
    salaryIncreaseRate: float = Field(..., description="Annual raise as a decimal.")


class MortgageDataPoint(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int = Field(..., ge=0)
    income: float
    percentage: float
    mortgagePayment: float


class MortgageResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    dataPoints: List[MortgageDataPoint]
    startPercentage: float
    endPercentage: float
    totalReduction: float
    finalIncome: float
    # threshold percentage -> first year at or below it, None if never
    milestones: Dict[int, Optional[int]]
