"""Data contracts for Coast FIRE calculations."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CoastFireInputs(BaseModel):
    """Inputs for a Coast FIRE projection. Rates are decimals (0.07 for 7%)."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    currentAge: int = Field(..., description="Age today, 18 to 80.")
    retirementAge: int = Field(..., description="Target retirement age, above currentAge.")
    annualSpending: float = Field(..., description="Yearly spending in retirement, today's dollars.")
    currentAssets: float = Field(..., description="Invested assets today.")
    monthlyContributions: float = Field(0.0, description="Ongoing monthly contribution.")
    investmentRate: float = Field(..., description="Nominal annual return.")
    inflationRate: float = Field(..., description="Annual inflation.")
    withdrawalRate: float = Field(..., description="Safe withdrawal rate in retirement.")
    enableRangeAnalysis: bool = Field(
        False, description="Return conservative/expected/optimistic scenarios instead of one result."
    )
    rateRange: Optional[float] = Field(
        None, description="Spread applied either side of investmentRate for scenario analysis."
    )


class GrowthPoint(BaseModel):
    """Net worth against the shrinking Coast FIRE target at one age."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    age: int
    netWorth: float
    coastFireRequired: float


class CoastFireResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    investmentRate: float
    regularFireNumber: float
    coastFireNumber: float
    currentProgress: float
    # None when the target is not reached before retirement, or when there are
    # no contributions to search with.
    yearsToCoastFire: Optional[int] = None
    monthlyNeeded: float = Field(..., ge=0)
    yearsToRetirement: int
    isCoastFireAchieved: bool
    projectedGrowth: List[GrowthPoint]


class ScenarioSet(BaseModel):
    """Three Coast FIRE results differing only in investment return."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    conservative: CoastFireResult
    expected: CoastFireResult
    optimistic: CoastFireResult
