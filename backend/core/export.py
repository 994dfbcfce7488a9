"""Flat-record export of a projection schedule."""

from __future__ import annotations

import pandas as pd

from backend.schemas.simulation import InvestmentResults

EXPORT_FILENAME = "simulacao_investimento.csv"

CSV_COLUMNS = {
    "month": "Mês",
    "contribution": "Aporte",
    "interest": "Juros",
    "balance": "Saldo Total",
    "totalInvested": "Total Investido",
}


def schedule_to_frame(results: InvestmentResults) -> pd.DataFrame:
    df = pd.DataFrame(
        [row.model_dump() for row in results.monthlyData],
        columns=list(CSV_COLUMNS),
    )
    return df.rename(columns=CSV_COLUMNS)


def schedule_to_csv(results: InvestmentResults) -> str:
    """One line per month, month 0 included, money with two decimals."""
    df = schedule_to_frame(results)
    return df.to_csv(index=False, float_format="%.2f", lineterminator="\n")
