"""Derived statistics shown next to the monthly breakdown table."""

from __future__ import annotations

from backend.schemas.simulation import InvestmentResults, ScheduleSummary


def effective_annual_rate(results: InvestmentResults) -> float:
    """Annualize the first month's yield: (1 + i1 / b0)^12 - 1."""
    rows = results.monthlyData
    if len(rows) < 2 or rows[0].balance == 0:
        return 0.0
    monthly_yield = rows[1].interest / rows[0].balance
    return (1 + monthly_yield) ** 12 - 1


def summarize_schedule(results: InvestmentResults) -> ScheduleSummary:
    initial = results.monthlyData[0].contribution if results.monthlyData else 0.0
    average = results.interestEarned / results.periods if results.periods > 0 else 0.0

    return ScheduleSummary(
        periods=results.periods,
        effectiveAnnualRate=effective_annual_rate(results),
        # recurring contributions only; month 0 holds the initial capital
        totalContributions=results.totalInvested - initial,
        averageMonthlyReturn=average,
    )
