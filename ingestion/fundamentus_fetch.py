# File: ingestion/fundamentus_fetch.py
import logging
from typing import Optional

import requests
import urllib3

# Stock detail page; the ticker is appended as-is
STOCK_PAGE_URL = "http://www.fundamentus.com.br/detalhes.php?papel="

HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows; U; Windows NT 6.1; rv:2.2) Gecko/20110201",
    "Accept": "text/html, text/plain, text/css, text/sgml, */*;q=0.01",
    "Accept-Encoding": "identity",
}

logger = logging.getLogger(__name__)


class FetchError(RuntimeError):
    """The stock page could not be retrieved."""


def build_stock_url(stock_code: str) -> str:
    return STOCK_PAGE_URL + stock_code


def _to_latin1_text(body: bytes) -> str:
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError:
        # fundamentus serves ISO-8859-1 pages
        text = body.decode("iso-8859-1")
    return text.encode("iso-8859-1", errors="replace").decode("iso-8859-1")


def get_stock_page(stock_code: str, timeout: Optional[float] = None) -> str:
    """
    Download the fundamentals page for a stock code and return it as a single
    line of text (carriage returns and line feeds removed).
    Raises FetchError on any non-200 answer or transport failure.
    """
    url = build_stock_url(stock_code)
    logger.debug(f"[fetch] GET {url}")
    try:
        with requests.get(
            url,
            headers=HEADERS,
            timeout=timeout,
            allow_redirects=False,
            stream=True,
        ) as resp:
            status = resp.status_code
            # raw read: no transparent gzip/deflate decoding; urllib3 errors
            # raised here are not wrapped by requests
            body = resp.raw.read(decode_content=False) if status == 200 else b""
    except (requests.RequestException, urllib3.exceptions.HTTPError) as e:
        logger.error(f"[fetch] {url} failed: {e}")
        raise FetchError(f"could not get stock data for {stock_code}") from e

    logger.debug(f"[fetch] {url} → HTTP {status}")
    if status != 200:
        raise FetchError(f"upstream answered HTTP {status} for {stock_code}")

    html = _to_latin1_text(body)
    return html.replace("\r", "").replace("\n", "")
