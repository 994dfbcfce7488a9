"""Data contracts for scenario comparisons and presets."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from backend.schemas.simulation import InvestmentResults, SimulationParams

MAX_SCENARIOS = 10


class NamedScenario(SimulationParams):
    """A user-labelled set of simulation parameters."""

    name: str = Field(..., min_length=1)

    def to_params(self) -> SimulationParams:
        return SimulationParams.model_validate(self.model_dump(exclude={"name"}))


class ScenarioComparisonRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    scenarios: List[NamedScenario] = Field(..., min_length=1, max_length=MAX_SCENARIOS)


class ScenarioOutcome(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    params: SimulationParams
    results: InvestmentResults


class ContributionComparison(BaseModel):
    """Current scenario versus the same scenario with no monthly contributions."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    current: InvestmentResults
    withoutContributions: InvestmentResults
    contributionDifference: float
    contributionPercentage: float


class QuickScenario(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    params: SimulationParams


class QuickScenariosResponse(BaseModel):
    defaults: SimulationParams
    scenarios: List[QuickScenario]
