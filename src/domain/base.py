"""Shared domain base classes and identifier helpers"""

from time import time_ns
from sqlmodel import SQLModel


class BaseModel(SQLModel):
    """Base class for all persisted domain entities"""

    pass


_last_invoice_id = 0


def generate_invoice_id() -> str:
    """
    Generate a time-derived invoice identifier

    The id is the current Unix time in milliseconds. Two calls landing in the
    same millisecond get consecutive values, so ids are strictly increasing
    within the process.

    Returns:
        Invoice id as a decimal string
    """
    global _last_invoice_id
    candidate = time_ns() // 1_000_000
    if candidate <= _last_invoice_id:
        candidate = _last_invoice_id + 1
    _last_invoice_id = candidate
    return str(candidate)
