"""Scenario comparison built on top of the projection engine."""

from __future__ import annotations

from typing import Iterable, List

from backend.core.projection import calculate_investment
from backend.schemas.comparison import (
    ContributionComparison,
    NamedScenario,
    ScenarioOutcome,
)
from backend.schemas.simulation import SimulationParams


def compare_without_contributions(params: SimulationParams) -> ContributionComparison:
    """
    Run the scenario as given and again with no monthly contributions.

    contributionPercentage is the share of the final amount explained by the
    monthly contributions (and the interest they earned).
    """
    current = calculate_investment(params)
    baseline = calculate_investment(params.model_copy(update={"monthlyContribution": 0.0}))

    difference = current.finalAmount - baseline.finalAmount
    percentage = (difference / current.finalAmount) * 100 if current.finalAmount != 0 else 0.0

    return ContributionComparison(
        current=current,
        withoutContributions=baseline,
        contributionDifference=difference,
        contributionPercentage=percentage,
    )


def compare_scenarios(scenarios: Iterable[NamedScenario]) -> List[ScenarioOutcome]:
    """Project every named scenario independently, keeping input order."""
    outcomes: List[ScenarioOutcome] = []
    for scenario in scenarios:
        params = scenario.to_params()
        outcomes.append(
            ScenarioOutcome(
                name=scenario.name,
                params=params,
                results=calculate_investment(params),
            )
        )
    return outcomes
