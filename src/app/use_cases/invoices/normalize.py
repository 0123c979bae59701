"""Invoice payload normalization

Turns an untyped request body into a NormalizedInvoiceDTO. Invalid line items
are dropped rather than rejected; the payload as a whole is rejected only when
a name is missing or no item survives.
"""

import math
from typing import Any, List, Mapping

from src.domain.errors import ValidationError
from src.domain.line_item import LineItem
from .dtos import NormalizedInvoiceDTO

NO_VALID_ITEMS_MESSAGE = "at least one valid item required"
TOTAL_OUT_OF_RANGE_MESSAGE = "invoice total is out of range"


def to_text(value: Any) -> str:
    """Coerce a value to a trimmed string; None becomes empty"""
    if value is None:
        return ""
    return str(value).strip()


def to_number(value: Any, fallback: float = 0.0) -> float:
    """
    Parse a value as a finite float

    Booleans count as 1/0 and an empty string as 0. Anything that does not
    parse, or parses to NaN or infinity, yields the fallback.
    """
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if value is None:
        return fallback
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return fallback
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            return fallback
    else:
        return fallback
    if not math.isfinite(number):
        return fallback
    return number


def normalize_items(raw_items: Any) -> List[LineItem]:
    if not isinstance(raw_items, list):
        return []

    items = []
    for raw in raw_items:
        if not isinstance(raw, Mapping):
            continue
        description = to_text(raw.get("description"))
        quantity = to_number(raw.get("qty"))
        unit_price = to_number(raw.get("price"))
        if not math.isfinite(quantity * unit_price):
            continue
        if description and quantity > 0 and unit_price >= 0:
            items.append(
                LineItem(description=description, quantity=quantity, unit_price=unit_price)
            )
    return items


def normalize_invoice_payload(payload: Any) -> NormalizedInvoiceDTO:
    """
    Validate and clean an invoice generation payload

    Args:
        payload: Decoded JSON body; anything other than an object counts as {}

    Returns:
        NormalizedInvoiceDTO with trimmed names and the surviving line items

    Raises:
        ValidationError: a name is empty, no line item is valid or the total
            overflows
    """
    if not isinstance(payload, Mapping):
        payload = {}

    company_name = to_text(payload.get("companyName"))
    if not company_name:
        raise ValidationError("companyName is required")

    client_name = to_text(payload.get("clientName"))
    if not client_name:
        raise ValidationError("clientName is required")

    items = normalize_items(payload.get("items"))
    if not items:
        raise ValidationError(NO_VALID_ITEMS_MESSAGE)

    if not math.isfinite(sum(item.line_total for item in items)):
        raise ValidationError(TOTAL_OUT_OF_RANGE_MESSAGE)

    return NormalizedInvoiceDTO(
        company_name=company_name,
        client_name=client_name,
        items=items,
    )
