# File: analysis/labels.py

# Label text as printed on fundamentus.com.br → canonical field name.
# Keys are matched exactly (case- and accent-sensitive).
LABEL_FIELDS = {
    "Cotação":    "price",  # current share price
    "LPA":        "eps",    # Earnings Per Share (value)
    "VPA":        "bvps",   # Book Value Per Share (value)
    "ROE":        "roe",    # Return on Equity (%)
    "P/L":        "pe",     # Price/Earnings (years)
    "P/VP":       "pbv",    # Price/Book Value (ratio)
    "Div. Yield": "dy",     # Dividend Yield (%)
}

FIELD_NAMES = tuple(LABEL_FIELDS.values())
