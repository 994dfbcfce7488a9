"""Static catalog of investment categories with indicative monthly rates."""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from backend.schemas.catalog import InvestmentType, Liquidity, RiskIndicator, RiskLevel
from backend.schemas.comparison import QuickScenario
from backend.schemas.simulation import SimulationParams, TimeUnit

INVESTMENT_TYPES: Tuple[InvestmentType, ...] = (
    InvestmentType(
        id="poupanca",
        name="Poupança",
        description="Investimento tradicional, isento de IR para pessoa física. Rendimento baixo mas garantido.",
        averageRate=0.5,
        minRate=0.3,
        maxRate=0.7,
        risk=RiskLevel.LOW,
        liquidity=Liquidity.IMMEDIATE,
    ),
    InvestmentType(
        id="cdb",
        name="CDB (Certificado de Depósito Bancário)",
        description="Título emitido por bancos. Garantido pelo FGC até R$ 250.000. Boa opção para renda fixa.",
        averageRate=1.0,
        minRate=0.8,
        maxRate=1.3,
        risk=RiskLevel.LOW,
        liquidity=Liquidity.AT_MATURITY,
    ),
    InvestmentType(
        id="tesouro-selic",
        name="Tesouro Selic",
        description="Título público atrelado à taxa Selic. Baixo risco e liquidez diária.",
        averageRate=0.9,
        minRate=0.7,
        maxRate=1.1,
        risk=RiskLevel.LOW,
        liquidity=Liquidity.DAILY,
    ),
    InvestmentType(
        id="tesouro-ipca",
        name="Tesouro IPCA+",
        description="Título público que protege da inflação. Indicado para objetivos de longo prazo.",
        averageRate=1.2,
        minRate=0.9,
        maxRate=1.5,
        risk=RiskLevel.LOW,
        liquidity=Liquidity.DAILY,
    ),
    InvestmentType(
        id="lci-lca",
        name="LCI/LCA",
        description="Letras de Crédito Imobiliário/Agronegócio. Isentas de IR para pessoa física.",
        averageRate=0.9,
        minRate=0.7,
        maxRate=1.2,
        risk=RiskLevel.LOW,
        liquidity=Liquidity.AT_MATURITY,
    ),
    InvestmentType(
        id="fundos-renda-fixa",
        name="Fundos de Renda Fixa",
        description="Fundos que investem em títulos de renda fixa. Diversificação profissional.",
        averageRate=0.8,
        minRate=0.5,
        maxRate=1.1,
        risk=RiskLevel.LOW,
        liquidity=Liquidity.DAILY,
    ),
    InvestmentType(
        id="fundos-multimercado",
        name="Fundos Multimercado",
        description="Fundos com estratégias diversificadas. Podem investir em várias classes de ativos.",
        averageRate=1.5,
        minRate=0.5,
        maxRate=2.5,
        risk=RiskLevel.MEDIUM,
        liquidity=Liquidity.DAILY,
    ),
    InvestmentType(
        id="acoes",
        name="Ações (Renda Variável)",
        description="Investimento em empresas listadas na bolsa. Maior potencial de retorno e risco.",
        averageRate=2.0,
        minRate=-1.0,
        maxRate=4.0,
        risk=RiskLevel.HIGH,
        liquidity=Liquidity.DAILY,
    ),
    InvestmentType(
        id="fiis",
        name="Fundos Imobiliários (FIIs)",
        description="Fundos que investem em imóveis. Distribuem dividendos mensais.",
        averageRate=1.3,
        minRate=0.3,
        maxRate=2.5,
        risk=RiskLevel.MEDIUM,
        liquidity=Liquidity.DAILY,
    ),
)

_BY_ID: Dict[str, InvestmentType] = {entry.id: entry for entry in INVESTMENT_TYPES}

_RISK_INDICATORS: Dict[RiskLevel, RiskIndicator] = {
    RiskLevel.LOW: RiskIndicator.SUCCESS,
    RiskLevel.MEDIUM: RiskIndicator.WARNING,
    RiskLevel.HIGH: RiskIndicator.DESTRUCTIVE,
}

DEFAULT_PARAMS = SimulationParams(
    initialValue=1000,
    monthlyContribution=500,
    interestRate=0.8,
    timePeriod=12,
    timeUnit=TimeUnit.MONTHS,
)

QUICK_SCENARIOS: Tuple[QuickScenario, ...] = tuple(
    QuickScenario(
        name=name,
        params=SimulationParams(
            initialValue=initial,
            monthlyContribution=monthly,
            interestRate=rate,
            timePeriod=period,
            timeUnit=TimeUnit.MONTHS,
        ),
    )
    for name, initial, monthly, rate, period in (
        ("Conservador", 5000, 1000, 0.8, 24),
        ("Moderado", 10000, 2000, 1.2, 36),
        ("Arrojado", 2000, 500, 1.5, 60),
        ("Longo Prazo", 1000, 300, 0.6, 120),
    )
)


def list_investment_types() -> Tuple[InvestmentType, ...]:
    return INVESTMENT_TYPES


def get_investment_type(type_id: str) -> Optional[InvestmentType]:
    """Return the catalog entry for ``type_id`` or None when there is none."""
    return _BY_ID.get(type_id)


def classify_risk(risk: RiskLevel) -> RiskIndicator:
    return _RISK_INDICATORS[RiskLevel(risk)]


def suggest_params(type_id: str, **overrides: Any) -> Optional[SimulationParams]:
    """
    Prefill simulation parameters from a catalog entry.

    Looks the entry up first, then builds SimulationParams with its average
    rate; any field in ``overrides`` wins over the defaults. Unknown ids give
    None so callers can decide how to report it.
    """
    entry = get_investment_type(type_id)
    if entry is None:
        return None

    fields: Dict[str, Any] = DEFAULT_PARAMS.model_dump()
    fields.update(interestRate=entry.averageRate, investmentType=entry.id)
    fields.update(overrides)
    return SimulationParams.model_validate(fields)
