import sys
import os
import json
import pytest

# The CLI lives in scripts/, which is not a package
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'scripts')))

import check_stock
import ingestion.fundamentus_fetch as ff
from sample_pages import PETR4_PAGE, NOT_FOUND_PAGE


@pytest.fixture
def serve(monkeypatch):
    monkeypatch.delenv("STOCK_API_TIMEOUT", raising=False)

    def install(html=None, error=None):
        def stub(stock_code, timeout=None):
            if error is not None:
                raise error
            return html
        monkeypatch.setattr(ff, "get_stock_page", stub)
    return install


def test_prints_valuation(serve, capsys):
    serve(html=PETR4_PAGE)
    assert check_stock.main(["PETR4F"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["stock"] == "PETR4"
    assert data["iv"] == 70.45


def test_not_found(serve, capsys):
    serve(html=NOT_FOUND_PAGE)
    assert check_stock.main(["XXXX3"]) == 1
    assert json.loads(capsys.readouterr().out) == {"error": "no stock found"}


def test_upstream_failure(serve, capsys):
    serve(error=ff.FetchError("boom"))
    assert check_stock.main(["PETR4"]) == 1
    assert json.loads(capsys.readouterr().out) == {"error": "could not get stock data"}


def test_empty_code(serve, capsys):
    assert check_stock.main([""]) == 1
    assert json.loads(capsys.readouterr().out) == {"error": "no stock code"}


def test_zero_code(serve, capsys):
    assert check_stock.main(["0"]) == 1
    assert json.loads(capsys.readouterr().out) == {"error": "no stock code"}
