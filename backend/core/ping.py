"""Health-check payload for the API."""

from backend.core.catalog import list_investment_types
from backend.schemas.ping import PingResponse


def get_ping_message() -> str:
    return "pong"


def build_ping(env: str) -> PingResponse:
    """Report liveness plus enough context to spot a misconfigured deploy."""
    return PingResponse(message=get_ping_message(), env=env, investmentTypes=len(list_investment_types()))
