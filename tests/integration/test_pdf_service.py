"""Integration tests for ReportLabPdfService

Renders real PDFs into a temporary directory.
"""

import os
import re
import pytest
from reportlab.lib.enums import TA_RIGHT
from reportlab.platypus import Paragraph

from src.adapter.services.pdf_service import (
    ReportLabPdfService,
    format_line,
    format_number,
    format_total,
)
from src.domain.errors import RenderError
from src.domain.invoice import Invoice
from src.domain.line_item import LineItem, total_of


def _invoice(items, invoice_id="1700000000001", company_name="Acme", client_name="Bob"):
    return Invoice(
        id=invoice_id,
        created_at="2024-01-31T12:00:00.000000+00:00",
        company_name=company_name,
        client_name=client_name,
        items_json=Invoice.serialize_items(items),
        total=total_of(items),
    )


def _page_count(pdf_bytes):
    return len(re.findall(rb"/Type\s*/Page(?![a-zA-Z])", pdf_bytes))


class TestFormatting:
    """Test the fixed text layout of invoice lines"""

    def test_widget_line(self):
        item = LineItem(description="Widget", quantity=2, unit_price=5)

        assert format_line(1, item) == "1. Widget — 2 x 5 = 10.00"

    def test_fractional_values(self):
        item = LineItem(description="Consulting", quantity=1.5, unit_price=80.25)

        assert format_line(3, item) == "3. Consulting — 1.5 x 80.25 = 120.38"

    def test_number_and_total_formatting(self):
        assert format_number(2.0) == "2"
        assert format_number(0.1) == "0.1"
        assert format_total(10) == "Total: 10.00"

    def test_document_lines_in_order(self, tmp_path):
        """The rendered flowables carry the header, item lines and total in layout order"""
        service = ReportLabPdfService(str(tmp_path))
        invoice = _invoice(
            [
                LineItem(description="Widget", quantity=2, unit_price=5),
                LineItem(description="Gadget", quantity=1.5, unit_price=4),
            ]
        )

        texts = [
            element.getPlainText()
            for element in service._elements(invoice)
            if isinstance(element, Paragraph)
        ]

        assert texts == [
            "Invoice",
            "From: Acme",
            "To: Bob",
            "Date: 2024-01-31",
            "Items:",
            "1. Widget — 2 x 5 = 10.00",
            "2. Gadget — 1.5 x 4 = 6.00",
            "Total: 16.00",
        ]

    def test_total_is_right_aligned(self, tmp_path):
        service = ReportLabPdfService(str(tmp_path))
        invoice = _invoice([LineItem(description="Widget", quantity=2, unit_price=5)])

        total = service._elements(invoice)[-1]

        assert total.getPlainText() == "Total: 10.00"
        assert total.style.alignment == TA_RIGHT


@pytest.mark.asyncio
class TestReportLabPdfServiceIntegration:
    """Render invoices to disk"""

    async def test_render_writes_complete_pdf(self, tmp_path):
        """
        Given: A normalized invoice
        When: render_invoice is awaited
        Then: A complete PDF exists under the final name and no partial file remains
        """
        output_dir = tmp_path / "generated"
        service = ReportLabPdfService(str(output_dir), url_prefix="/generated/")
        invoice = _invoice([LineItem(description="Widget", quantity=2, unit_price=5)])

        rendered = await service.render_invoice(invoice)

        assert rendered.url == "/generated/invoice-1700000000001.pdf"
        assert rendered.path == str(output_dir / "invoice-1700000000001.pdf")
        data = (output_dir / "invoice-1700000000001.pdf").read_bytes()
        assert data.startswith(b"%PDF")
        assert data.rstrip().endswith(b"%%EOF")
        assert _page_count(data) == 1
        assert os.listdir(output_dir) == ["invoice-1700000000001.pdf"]

    async def test_long_invoice_spans_pages(self, tmp_path):
        service = ReportLabPdfService(str(tmp_path))
        items = [
            LineItem(description=f"Item {n}", quantity=1, unit_price=n) for n in range(1, 151)
        ]

        rendered = await service.render_invoice(_invoice(items))

        with open(rendered.path, "rb") as handle:
            assert _page_count(handle.read()) > 1

    async def test_markup_in_names_is_rendered_literally(self, tmp_path):
        service = ReportLabPdfService(str(tmp_path))
        invoice = _invoice(
            [LineItem(description="<b>Bolts & nuts</b>", quantity=1, unit_price=1)],
            company_name="Smith & Sons <Ltd>",
        )

        rendered = await service.render_invoice(invoice)

        assert os.path.getsize(rendered.path) > 0

    async def test_write_failure_raises_render_error(self, tmp_path):
        """
        Given: The output directory cannot be created
        When: render_invoice is awaited
        Then: RenderError carries the cause and no file is left behind
        """
        blocker = tmp_path / "generated"
        blocker.write_text("not a directory")
        service = ReportLabPdfService(str(blocker))

        with pytest.raises(RenderError) as exc_info:
            await service.render_invoice(
                _invoice([LineItem(description="Widget", quantity=2, unit_price=5)])
            )

        assert exc_info.value.code == "RENDER_FAILED"
        assert exc_info.value.cause is not None
        assert sorted(os.listdir(tmp_path)) == ["generated"]

    async def test_build_failure_removes_partial_file(self, tmp_path, monkeypatch):
        service = ReportLabPdfService(str(tmp_path))

        def explode(handle, invoice):
            handle.write(b"%PDF-1.4 half written")
            raise RuntimeError("layout failed")

        monkeypatch.setattr(service, "_build_document", explode)

        with pytest.raises(RenderError) as exc_info:
            await service.render_invoice(
                _invoice([LineItem(description="Widget", quantity=2, unit_price=5)])
            )

        assert str(exc_info.value.cause) == "layout failed"
        assert os.listdir(tmp_path) == []
