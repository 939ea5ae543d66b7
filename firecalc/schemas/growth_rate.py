"""Data contracts for the compound annual growth rate calculator."""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class GrowthBand(str, Enum):
    NEGATIVE = "negative"
    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    STRONG = "strong"
    EXCEPTIONAL = "exceptional"


class GrowthInputs(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    startingAmount: float = Field(..., description="Value at the start, above zero.")
    endingAmount: float = Field(..., description="Value at the end, above zero.")
    numberOfYears: float = Field(..., description="Elapsed years, up to 100.")


class GrowthResult(BaseModel):
    """Rates are percentages (14.87 for 14.87%)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    annualGrowthRate: float
    totalGrowthPercentage: float
    totalDollarChange: float
    monthlyGrowthRate: float
    isPositiveGrowth: bool
    isExceptionalGrowth: bool
    classification: GrowthBand
    warnings: List[str] = Field(default_factory=list)
