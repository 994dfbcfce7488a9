"""Pydantic schemas for the investment type catalog."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class RiskLevel(str, Enum):
    LOW = "Baixo"
    MEDIUM = "Médio"
    HIGH = "Alto"


class Liquidity(str, Enum):
    IMMEDIATE = "Imediata"
    DAILY = "Diária"
    AT_MATURITY = "Vencimento"


class RiskIndicator(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    DESTRUCTIVE = "destructive"


class InvestmentType(BaseModel):
    """One catalog row; rates are percent per month."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    name: str
    description: str
    averageRate: float
    minRate: float
    maxRate: float
    risk: RiskLevel
    liquidity: Liquidity


class InvestmentTypeView(InvestmentType):
    # inherits every catalog field, adds the display hint
    riskIndicator: RiskIndicator
