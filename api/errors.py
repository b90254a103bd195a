# File: api/errors.py


class StockApiError(Exception):
    """An error that ends the request with a JSON {"error": message} body."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequest(StockApiError):
    status_code = 400


class Unauthorized(StockApiError):
    status_code = 401


class NotFound(StockApiError):
    status_code = 404


class UpstreamError(StockApiError):
    status_code = 500
