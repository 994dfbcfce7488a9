"""Data contracts for investment projections."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

MIN_INTEREST_RATE = -2.0
MAX_INTEREST_RATE = 20.0
MAX_TIME_PERIOD = 600
MONTHS_PER_YEAR = 12


class TimeUnit(str, Enum):
    MONTHS = "months"
    YEARS = "years"


class SimulationParams(BaseModel):
    """Inputs required to compute a monthly projection."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    initialValue: float = Field(..., ge=0, description="Capital present at month 0.")
    monthlyContribution: float = Field(
        ...,
        ge=0,
        description="Amount added at the end of every month from month 1 onward.",
    )
    interestRate: float = Field(
        ...,
        ge=MIN_INTEREST_RATE,
        le=MAX_INTEREST_RATE,
        description="Percent per month (e.g. 0.8 for 0.8%).",
    )
    timePeriod: int = Field(..., ge=1, le=MAX_TIME_PERIOD)
    timeUnit: TimeUnit = TimeUnit.MONTHS
    investmentType: Optional[str] = None

    @property
    def total_months(self) -> int:
        if self.timeUnit == TimeUnit.YEARS:
            return self.timePeriod * MONTHS_PER_YEAR
        return self.timePeriod


class MonthlyData(BaseModel):
    """Single row of a monthly schedule."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    month: int = Field(..., ge=0)
    contribution: float
    interest: float
    balance: float
    totalInvested: float


class InvestmentResults(BaseModel):
    """Projected schedule plus aggregate figures."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    finalAmount: float
    totalInvested: float
    interestEarned: float
    returnPercentage: float
    monthlyData: List[MonthlyData]
    periods: int = Field(..., ge=0)


class ScheduleSummary(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    periods: int
    effectiveAnnualRate: float
    totalContributions: float
    averageMonthlyReturn: float


class SimulationResponse(BaseModel):
    results: InvestmentResults
    summary: ScheduleSummary
