"""Business data entry record."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.utils.clock import as_utc


class BusinessEntry(BaseModel):
    """
    One product/sales line as recorded by the business-data form.

    Numeric fields arrive already parsed. Only ``date``, ``price`` and
    ``sales`` are needed by the goal engine; the cost fields feed the
    profit & loss analysis.
    """

    model_config = ConfigDict(populate_by_name=True)

    date: datetime
    price: float = Field(default=0.0, ge=0)
    sales: int = Field(default=0, ge=0)
    region: Optional[str] = None
    rating: Optional[float] = Field(default=None, ge=0, le=5)

    product_name: Optional[str] = Field(default=None, alias="productName")
    category: Optional[str] = None
    expenses: float = Field(default=0.0, ge=0)  # cost per unit sold
    marketing_spend: float = Field(default=0.0, ge=0, alias="marketingSpend")
    units_returned: int = Field(default=0, ge=0, alias="unitsReturned")

    @field_validator("date", mode="before")
    @classmethod
    def _accept_plain_dates(cls, value):
        if isinstance(value, datetime) or not hasattr(value, "isoformat"):
            return value
        return as_utc(value)

    @field_validator("date")
    @classmethod
    def _to_utc(cls, value: datetime) -> datetime:
        return as_utc(value)

    @property
    def revenue(self) -> float:
        return self.price * self.sales

    @property
    def cost(self) -> float:
        return self.expenses * self.sales

    @property
    def profit(self) -> float:
        return self.revenue - self.cost
