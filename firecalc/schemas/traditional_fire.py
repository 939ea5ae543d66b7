"""Data contracts for traditional FIRE calculations."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class TraditionalFireInputs(BaseModel):
    """Inputs for time-to-FIRE. Rates are decimals."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    yearlySpending: float = Field(..., description="Yearly spending, 15,000 to 500,000.")
    monthlyInvestments: float = Field(..., description="Monthly contribution, 100 to 50,000.")
    currentInvestedAssets: float = Field(..., description="Invested today, 0 to 10,000,000.")
    expectedReturnRate: float = Field(..., description="Nominal annual return, above inflation.")
    inflationRate: float = Field(..., description="Annual inflation.")
    safeWithdrawalRate: float = Field(..., description="Withdrawal rate that defines the FIRE number.")


class TimeToFire(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    years: float = Field(..., ge=0)
    months: int = Field(..., ge=0, le=12)
    totalMonths: int = Field(..., ge=0)
    achievable: bool


class PortfolioPoint(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int = Field(..., ge=0)
    portfolioValue: float


class TraditionalFireResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    fireNumber: float
    timeToFire: TimeToFire
    currentProgress: float
    monthlyRetirementIncome: float
    projectedPortfolioValue: float
    totalContributions: float
    investmentGrowth: float = Field(..., ge=0)
    projectionData: List[PortfolioPoint]
