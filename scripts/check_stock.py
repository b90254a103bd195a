# File: scripts/check_stock.py
import sys, os
import argparse
import json

# Add the parent of the scripts folder (the project root) to sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from analysis.extract_fields import extract_fields, StockNotFoundError
from analysis.valuation import value_stock
from api.config import load_settings
from api.routers.stock import get_stock_code, is_blank
import ingestion.fundamentus_fetch as ff


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Print the Graham valuation of one stock, without starting the API."
    )
    parser.add_argument("stock", help="Ticker, e.g. PETR4 (a trailing F is ignored)")
    parser.add_argument("--pretty", action="store_true", help="Indent the JSON output.")
    args = parser.parse_args(argv)
    indent = 2 if args.pretty else None

    if is_blank(args.stock):
        print(json.dumps({"error": "no stock code"}, indent=indent))
        return 1

    stock_code = get_stock_code(args.stock)
    try:
        html = ff.get_stock_page(stock_code, load_settings().timeout)
        result = value_stock(stock_code, extract_fields(html)).model_dump()
    except ff.FetchError:
        print(json.dumps({"error": "could not get stock data"}, indent=indent))
        return 1
    except StockNotFoundError:
        print(json.dumps({"error": "no stock found"}, indent=indent))
        return 1

    print(json.dumps(result, indent=indent, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
