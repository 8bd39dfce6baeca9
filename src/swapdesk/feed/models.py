"""Wire models for the JSON price endpoint."""

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, TypeAdapter, field_validator

from swapdesk.models import TokenQuote


class RawPrice(BaseModel):
    """One entry of the prices.json payload."""

    currency: str = Field(min_length=1)
    date: datetime
    price: Decimal

    model_config = {"extra": "ignore"}

    @field_validator("price", mode="before")
    @classmethod
    def _float_via_str(cls, value: Any) -> Any:
        # JSON numbers arrive as float; keep their shortest repr, not the binary expansion
        if isinstance(value, float):
            return str(value)
        return value

    def to_quote(self) -> TokenQuote:
        return TokenQuote(
            symbol=self.currency,
            as_of=self.date,
            unit_price_usd=self.price,
        )


RAW_PRICE_LIST = TypeAdapter(list[RawPrice])
