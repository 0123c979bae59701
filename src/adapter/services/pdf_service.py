"""ReportLab PDF Generation Service Implementation

Implements invoice rendering using ReportLab library.
"""

import asyncio
import os
from datetime import datetime
from typing import List
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_RIGHT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer

from src.app.services.pdf_service import PdfService
from src.app.use_cases.invoices.dtos import RenderedInvoiceDTO
from src.domain.errors import RenderError
from src.domain.invoice import Invoice
from src.domain.line_item import LineItem


def format_number(value: float) -> str:
    """Print whole numbers without a trailing .0"""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_line(index: int, item: LineItem) -> str:
    return (
        f"{index}. {item.description} — "
        f"{format_number(item.quantity)} x {format_number(item.unit_price)} = "
        f"{item.line_total:.2f}"
    )


def format_total(total: float) -> str:
    return f"Total: {total:.2f}"


def _draw_page_number(canvas, doc):
    canvas.saveState()
    canvas.setFont("Helvetica", 8)
    canvas.setFillColor(colors.HexColor("#95A5A6"))
    canvas.drawRightString(A4[0] - 20 * mm, 10 * mm, f"Page {doc.page}")
    canvas.restoreState()


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService

    Writes invoice-<id>.pdf into output_dir and exposes it under url_prefix.
    The document is built into a .part file and renamed once complete, so a
    file under the final name is always a whole PDF.
    """

    def __init__(self, output_dir: str, url_prefix: str = "/generated"):
        self.output_dir = output_dir
        self.url_prefix = url_prefix.rstrip("/")

    async def render_invoice(self, invoice: Invoice) -> RenderedInvoiceDTO:
        """
        Render an invoice PDF to disk

        Args:
            invoice: Invoice entity with header fields and line items

        Returns:
            RenderedInvoiceDTO with the file path and public URL
        """
        filename = invoice.filename
        path = os.path.join(self.output_dir, filename)

        await asyncio.to_thread(self._write_pdf, invoice, path)

        return RenderedInvoiceDTO(path=path, url=f"{self.url_prefix}/{filename}")

    def _write_pdf(self, invoice: Invoice, path: str) -> None:
        part_path = f"{path}.part"
        try:
            os.makedirs(self.output_dir, exist_ok=True)
            with open(part_path, "wb") as handle:
                self._build_document(handle, invoice)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(part_path, path)
        except Exception as e:
            if os.path.exists(part_path):
                os.remove(part_path)
            raise RenderError(f"Failed to render invoice {invoice.id}", cause=e) from e

    def _build_document(self, handle, invoice: Invoice) -> None:
        doc = SimpleDocTemplate(
            handle,
            pagesize=A4,
            rightMargin=20 * mm,
            leftMargin=20 * mm,
            topMargin=20 * mm,
            bottomMargin=20 * mm,
            title=f"Invoice {invoice.id}",
            author=invoice.company_name,
        )
        doc.build(
            self._elements(invoice),
            onFirstPage=_draw_page_number,
            onLaterPages=_draw_page_number,
        )

    def _elements(self, invoice: Invoice) -> List:
        styles = getSampleStyleSheet()

        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=20,
            alignment=TA_CENTER,
            spaceAfter=10,
        )
        normal_style = ParagraphStyle(
            "NormalStyle",
            parent=styles["Normal"],
            fontSize=12,
            leading=16,
        )
        total_style = ParagraphStyle(
            "TotalStyle",
            parent=normal_style,
            fontName="Helvetica-Bold",
            alignment=TA_RIGHT,
        )

        created = datetime.fromisoformat(invoice.created_at)

        elements = [
            Paragraph("Invoice", title_style),
            Spacer(1, 6 * mm),
            Paragraph(escape(f"From: {invoice.company_name}"), normal_style),
            Paragraph(escape(f"To: {invoice.client_name}"), normal_style),
            Paragraph(f"Date: {created.strftime('%Y-%m-%d')}", normal_style),
            Spacer(1, 6 * mm),
            Paragraph("Items:", normal_style),
        ]

        for index, item in enumerate(invoice.line_items, start=1):
            elements.append(Paragraph(escape(format_line(index, item)), normal_style))

        elements.append(Spacer(1, 6 * mm))
        elements.append(Paragraph(format_total(invoice.total), total_style))
        return elements
