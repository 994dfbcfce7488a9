from __future__ import annotations

import pytest
from pydantic import ValidationError

from backend.core.catalog import (
    DEFAULT_PARAMS,
    INVESTMENT_TYPES,
    QUICK_SCENARIOS,
    classify_risk,
    get_investment_type,
    list_investment_types,
    suggest_params,
)
from backend.schemas.catalog import RiskIndicator, RiskLevel
from backend.schemas.simulation import MAX_INTEREST_RATE, MIN_INTEREST_RATE, TimeUnit


def test_catalog_has_nine_unique_entries():
    ids = [entry.id for entry in list_investment_types()]

    assert len(ids) == 9
    assert len(set(ids)) == len(ids)


@pytest.mark.parametrize("entry", INVESTMENT_TYPES, ids=lambda entry: entry.id)
def test_rate_band_is_ordered(entry):
    assert entry.minRate <= entry.averageRate <= entry.maxRate
    assert MIN_INTEREST_RATE <= entry.minRate
    assert entry.maxRate <= MAX_INTEREST_RATE


def test_lookup_cdb():
    entry = get_investment_type("cdb")

    assert entry is not None
    assert entry.minRate <= entry.averageRate <= entry.maxRate
    assert entry.averageRate == 1.0
    assert entry.risk == RiskLevel.LOW


def test_lookup_unknown_returns_none():
    assert get_investment_type("unknown-id") is None
    assert get_investment_type("") is None


@pytest.mark.parametrize(
    "risk, expected",
    [
        (RiskLevel.LOW, RiskIndicator.SUCCESS),
        (RiskLevel.MEDIUM, RiskIndicator.WARNING),
        (RiskLevel.HIGH, RiskIndicator.DESTRUCTIVE),
        ("Alto", RiskIndicator.DESTRUCTIVE),
    ],
)
def test_classify_risk(risk, expected):
    assert classify_risk(risk) == expected


def test_suggest_params_uses_average_rate():
    params = suggest_params("acoes", initialValue=2000, timePeriod=2, timeUnit="years")

    assert params is not None
    assert params.interestRate == 2.0
    assert params.investmentType == "acoes"
    assert params.initialValue == 2000
    assert params.monthlyContribution == DEFAULT_PARAMS.monthlyContribution
    assert params.total_months == 24


def test_suggest_params_overrides_rate():
    params = suggest_params("poupanca", interestRate=0.65)

    assert params is not None
    assert params.interestRate == 0.65


def test_suggest_params_unknown_id():
    assert suggest_params("does-not-exist") is None


def test_suggest_params_still_validates_overrides():
    with pytest.raises(ValidationError):
        suggest_params("cdb", timePeriod=601)


def test_quick_scenarios_are_monthly_presets():
    names = [scenario.name for scenario in QUICK_SCENARIOS]

    assert names == ["Conservador", "Moderado", "Arrojado", "Longo Prazo"]
    assert all(scenario.params.timeUnit == TimeUnit.MONTHS for scenario in QUICK_SCENARIOS)
    assert QUICK_SCENARIOS[1].params.interestRate == 1.2
