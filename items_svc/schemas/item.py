from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, PrivateAttr, model_validator


class ItemPayload(BaseModel):
    """Request body for create and update.

    ``name`` and ``price`` are optional here so the handlers can answer a
    missing field with their own 400 message instead of a schema error.
    """

    name: str | None = None
    description: str | None = None
    category: str | None = None
    price: Decimal | None = None

    # price as sent by the client; "0.00" is present even though Decimal("0.00") is falsy
    _raw_price: Any = PrivateAttr(default=None)

    @model_validator(mode="wrap")
    @classmethod
    def _keep_raw_price(cls, data: Any, handler: Any) -> "ItemPayload":
        payload = handler(data)
        if isinstance(data, dict):
            payload._raw_price = data.get("price")
        return payload

    def has_required_fields(self) -> bool:
        return bool(self.name) and bool(self._raw_price)


class Item(BaseModel):
    id: int
    name: str
    description: str | None = None
    category: str | None = None
    price: float | None = None

    model_config = ConfigDict(from_attributes=True)


class ItemCreated(BaseModel):
    message: str
    id: int


class Message(BaseModel):
    message: str
