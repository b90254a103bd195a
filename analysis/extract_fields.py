# File: analysis/extract_fields.py
import re
import math
import logging
from typing import Dict, List

from analysis.labels import LABEL_FIELDS
from analysis.models import FieldSet

# Upstream phrase shown when the ticker does not exist
NOT_FOUND_MARKER = "Nenhum papel encontrado"

TXT_SPAN_PATTERN = re.compile(r'<span\sclass="txt"[^>]*>(.*?)</span>', re.DOTALL)
NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
STRIP_PATTERN = re.compile(r"\s|%")

logger = logging.getLogger(__name__)


class StockNotFoundError(LookupError):
    """The page reports that no security matches the requested code."""


def ensure_stock_found(html: str) -> None:
    if NOT_FOUND_MARKER in html:
        raise StockNotFoundError("no stock found")


def find_txt_spans(html: str) -> List[str]:
    """Inner text of every <span class="txt"> element, in page order."""
    return TXT_SPAN_PATTERN.findall(html)


def parse_number(raw: str) -> float:
    """
    Turn a page value like " 1.234,5% " into a float.

    Whitespace and '%' are dropped and ',' becomes the decimal point. Only the
    leading numeric part is read, and a value with no number at all is 0.0
    rather than an error.
    """
    cleaned = STRIP_PATTERN.sub("", raw).replace(",", ".")
    m = NUMBER_PATTERN.match(cleaned)
    if not m:
        return 0.0
    number = float(m.group(0))
    # overflowing literals such as 1e999 are no usable number either
    return number if math.isfinite(number) else 0.0


def extract_fields(html: str) -> FieldSet:
    """
    Read the label/value span pairs of a stock page into a FieldSet.

    Whenever a span's text is a known label, the span right after it is its
    value; scanning then continues after that value.
    """
    ensure_stock_found(html)

    spans = find_txt_spans(html)
    data: Dict[str, float] = {}
    index = 0
    while index < len(spans):
        field = LABEL_FIELDS.get(spans[index])
        if field is not None:
            index += 1
            raw = spans[index] if index < len(spans) else ""
            data[field] = parse_number(raw)
        index += 1

    logger.debug(f"[extract] {len(spans)} spans → {data}")
    return FieldSet(**data)
