# File: api/utils.py
import logging
from typing import Dict

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


class JSONUTF8Response(JSONResponse):
    media_type = "application/json; charset=utf-8"


async def read_request_params(request: Request) -> Dict[str, str]:
    """
    Merge query-string parameters with form or JSON body parameters.
    Body values win over query values with the same name.
    """
    params = {k: v for k, v in request.query_params.items()}
    if request.method not in ("POST", "PUT", "PATCH"):
        return params

    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_TYPES):
        form = await request.form()
        params.update({k: v for k, v in form.items() if isinstance(v, str)})
    elif content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            logger.debug("[params] ignoring malformed JSON body")
            body = None
        if isinstance(body, dict):
            params.update({k: str(v) for k, v in body.items() if v is not None})
    return params
