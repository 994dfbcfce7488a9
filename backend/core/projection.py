"""Monthly projection engine."""

from __future__ import annotations

from typing import List

from backend.schemas.simulation import (
    InvestmentResults,
    MonthlyData,
    SimulationParams,
)


def calculate_investment(params: SimulationParams) -> InvestmentResults:
    """
    Build a month-by-month schedule for month 0..periods (inclusive).

    Order of operations (per month):
      1) Interest on the balance carried over from the previous month.
      2) Add interest and this month's contribution to the balance.
      3) Record row.

    Contributions earn nothing in the month they are made. No rounding is
    applied; formatting is the caller's business. Inputs are trusted to be
    within the SimulationParams bounds.
    """
    rate = params.interestRate / 100
    periods = params.total_months
    monthly = params.monthlyContribution

    balance = float(params.initialValue)
    total_invested = float(params.initialValue)

    rows: List[MonthlyData] = [
        MonthlyData(
            month=0,
            contribution=balance,
            interest=0.0,
            balance=balance,
            totalInvested=total_invested,
        )
    ]

    for month in range(1, periods + 1):
        # interest only on what was already in the account
        interest = balance * rate
        balance += interest + monthly
        total_invested += monthly

        rows.append(
            MonthlyData(
                month=month,
                contribution=monthly,
                interest=interest,
                balance=balance,
                totalInvested=total_invested,
            )
        )

    interest_earned = balance - total_invested
    return_percentage = (interest_earned / total_invested) * 100 if total_invested > 0 else 0.0

    return InvestmentResults(
        finalAmount=balance,
        totalInvested=total_invested,
        interestEarned=interest_earned,
        returnPercentage=return_percentage,
        monthlyData=rows,
        periods=periods,
    )
