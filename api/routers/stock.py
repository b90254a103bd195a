# File: api/routers/stock.py
import logging
from typing import Dict, Optional

from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool

from analysis.extract_fields import extract_fields, StockNotFoundError
from analysis.valuation import value_stock
from api.config import Settings, get_settings
from api.errors import BadRequest, NotFound, Unauthorized, UpstreamError
from api.utils import JSONUTF8Response, read_request_params
import ingestion.fundamentus_fetch as ff

# Suffix used for the fractional-lot market (e.g. PETR4F)
FRACTIONAL_SUFFIX = "F"

# Parameters are read the same way whatever the method
STOCK_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"]

router = APIRouter()
logger = logging.getLogger(__name__)


def is_blank(value: Optional[str]) -> bool:
    """Missing, empty or "0" all count as no value."""
    return not value or value == "0"


def authenticate_request(params: Dict[str, str], settings: Settings) -> None:
    if not settings.auth_tokens:
        return
    token = params.get("token")
    if is_blank(token) or token not in settings.auth_tokens:
        logger.warning("[stock] rejected request with missing or unknown token")
        raise Unauthorized("unauthorized")


def validate_request(params: Dict[str, str]) -> None:
    if is_blank(params.get("stock")):
        raise BadRequest("no stock code")


def get_stock_code(code: str) -> str:
    """Drop the fractional-market suffix, if any."""
    if code.endswith(FRACTIONAL_SUFFIX):
        return code[:-len(FRACTIONAL_SUFFIX)]
    return code


@router.api_route("/stock", methods=STOCK_METHODS, response_class=JSONUTF8Response)
async def stock(request: Request, settings: Settings = Depends(get_settings)):
    params = await read_request_params(request)
    authenticate_request(params, settings)
    validate_request(params)

    stock_code = get_stock_code(params["stock"])
    logger.info(f"[stock] valuation requested for {stock_code!r}")

    try:
        html = await run_in_threadpool(ff.get_stock_page, stock_code, settings.timeout)
    except ff.FetchError as e:
        logger.error(f"[stock] {e}")
        raise UpstreamError("could not get stock data")

    try:
        fields = extract_fields(html)
    except StockNotFoundError:
        logger.info(f"[stock] no stock found for {stock_code!r}")
        raise NotFound("no stock found")

    valuation = value_stock(stock_code, fields)
    return JSONUTF8Response(content=valuation.model_dump())
