"""Invoice Domain Errors

Exceptions raised by the normalizer, the renderer and the store. Use cases
translate them into Result errors.
"""

from typing import Optional


class InvoiceError(Exception):
    """Base class for invoice generation failures"""

    code = "INVOICE_ERROR"

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class ValidationError(InvoiceError):
    """Client payload is malformed or incomplete"""

    code = "VALIDATION_ERROR"


class RenderError(InvoiceError):
    """PDF artifact could not be generated or written"""

    code = "RENDER_FAILED"


class StoreError(InvoiceError):
    """Invoice record could not be persisted"""

    code = "STORE_FAILED"
