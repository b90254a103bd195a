from typing import Optional
import logging

import uvicorn
from fastapi import FastAPI, Request

from api.config import Settings, load_settings
from api.errors import StockApiError
from api.routers import stock
from api.utils import JSONUTF8Response

logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s %(levelname)s %(name)s – %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the API. Settings are fixed for the lifetime of the app; when none
    are given they are read from the environment.
    """
    app = FastAPI(
        title="Fundamentus Valuation API",
        description="Graham intrinsic value and safety margin for B3 stocks",
        version="0.1.0",
    )
    app.state.settings = settings if settings is not None else load_settings()
    if not app.state.settings.auth_tokens:
        logger.info("No API tokens configured; authentication is disabled.")

    @app.exception_handler(StockApiError)
    async def stock_api_error_handler(request: Request, exc: StockApiError):
        return JSONUTF8Response(status_code=exc.status_code, content={"error": exc.message})

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    app.include_router(stock.router)
    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run("api.main:app", host="127.0.0.1", port=8000, reload=True)
