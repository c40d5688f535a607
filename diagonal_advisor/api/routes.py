"""HTTP routes: strategy evaluation and reserved market data providers."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, HTTPException, Request, status
from pydantic import ValidationError

from diagonal_advisor.models.result import StrategyResult
from diagonal_advisor.providers import get_provider

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


@router.post(
    "/evaluate",
    response_model=StrategyResult,
    status_code=status.HTTP_200_OK,
    summary="Evaluate an input snapshot",
)
def evaluate_snapshot(request: Request, raw: dict[str, Any] = Body(...)) -> StrategyResult:
    """Evaluate a form-shaped snapshot (snake_case or camelCase keys).

    Malformed numbers fall back to defaults; only a missing or unknown
    trend is rejected with 422.
    """
    advisor = request.app.state.advisor
    try:
        inputs = advisor.build_inputs(raw)
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=exc.errors(include_url=False, include_context=False),
        ) from exc
    return advisor.evaluate(inputs)


@router.get("/{provider}", summary="Market data snapshot from a registered provider")
def provider_snapshot(provider: str, ticker: str = "SPY") -> dict[str, Any]:
    """Resolve ``provider`` through the registry at request time.

    Unknown names are 404; reserved stubs surface as 501 via the app's
    exception handler.
    """
    try:
        source = get_provider(provider)
    except KeyError as exc:
        logger.debug("Unknown provider requested: %s", provider)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.args[0]) from exc
    snapshot = source.get_snapshot(ticker)
    return {"ok": True, "provider": source.provider_name, "data": snapshot}
