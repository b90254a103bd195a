# File: analysis/models.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class FieldSet(BaseModel):
    """Fundamentals scraped from one stock page. Any field may be missing."""
    model_config = ConfigDict(frozen=True)

    price: Optional[float] = Field(None, description="Current price (Cotação)")
    eps: Optional[float] = Field(None, description="Earnings per share (LPA)")
    bvps: Optional[float] = Field(None, description="Book value per share (VPA)")
    roe: Optional[float] = Field(None, description="Return on equity, %")
    pe: Optional[float] = Field(None, description="Price/Earnings")
    pbv: Optional[float] = Field(None, description="Price/Book value")
    dy: Optional[float] = Field(None, description="Dividend yield, %")


class StockValuation(BaseModel):
    """Body of a successful /stock response; missing fundamentals are 0.0."""
    stock: str = Field(..., description="Ticker without the fractional-market suffix")
    price: float = 0.0
    iv: float = Field(0.0, description="Graham intrinsic value")
    sm: float = Field(0.0, description="Safety margin, %")
    eps: float = 0.0
    bvps: float = 0.0
    roe: float = 0.0
    pe: float = 0.0
    pbv: float = 0.0
    dy: float = 0.0
