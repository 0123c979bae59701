"""Line Item Value Object

One billable entry of an invoice.
"""

from typing import Any, Dict, List
from pydantic import BaseModel, ConfigDict, Field


class LineItem(BaseModel):
    """
    Line Item - description, quantity and unit price

    Domain Rules:
    - description is non-empty
    - quantity > 0
    - unit_price >= 0
    - line_total = quantity * unit_price
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    description: str = Field(min_length=1)
    quantity: float = Field(alias="qty", gt=0)
    unit_price: float = Field(alias="price", ge=0)

    @property
    def line_total(self) -> float:
        return self.quantity * self.unit_price

    def to_record(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


def total_of(items: List[LineItem]) -> float:
    """Sum of line totals, rounded to cents"""
    return round(sum(item.line_total for item in items), 2)
