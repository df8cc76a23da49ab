"""Tests for PdfWriter — ReportLab rendering and money formatting."""

from datetime import datetime
from decimal import Decimal
from io import BytesIO

from pypdf import PdfReader
from reportlab.platypus import Paragraph, Table

from salesreport.domain.models import SaleRecord
from salesreport.report.pdf_writer import (
    TABLE_HEADERS,
    PdfWriter,
    format_currency,
    table_rows,
    total_line,
    total_value,
)


def _pdf_text(content: bytes) -> str:
    reader = PdfReader(BytesIO(content))
    return "\n".join(page.extract_text() or "" for page in reader.pages)


class TestFormatCurrency:
    def test_thousands_and_decimals(self):
        assert format_currency(Decimal("1500")) == "R$ 1.500,00"

    def test_small_amount(self):
        assert format_currency(Decimal("9.5")) == "R$ 9,50"

    def test_zero(self):
        assert format_currency(Decimal("0")) == "R$ 0,00"

    def test_millions(self):
        assert format_currency(Decimal("1234567.891")) == "R$ 1.234.567,89"

    def test_rounds_half_up(self):
        assert format_currency(Decimal("0.005")) == "R$ 0,01"


class TestTableRows:
    def test_header_plus_one_row_per_record(self, sample_records):
        rows = table_rows(sample_records)
        assert len(rows) == len(sample_records) + 1
        assert rows[0] == TABLE_HEADERS

    def test_row_cells(self, sample_records):
        rows = table_rows(sample_records)
        assert rows[1] == ["31/01/2024", "Produto A", "10", "R$ 1.000,00"]
        assert rows[2] == ["30/01/2024", "Produto B", "5", "R$ 500,00"]

    def test_empty_is_header_only(self):
        assert table_rows([]) == [TABLE_HEADERS]


class TestTotals:
    def test_sum(self, sample_records):
        assert total_value(sample_records) == Decimal("1500")
        assert total_line(sample_records) == "Total de Vendas: R$ 1.500,00"

    def test_empty_total(self):
        assert total_value([]) == Decimal("0")
        assert total_line([]) == "Total de Vendas: R$ 0,00"

    def test_fractional_sum(self):
        records = [
            SaleRecord(date=datetime(2024, 1, 1), product_name="X", quantity=1, total_value=Decimal("0.10")),
            SaleRecord(date=datetime(2024, 1, 1), product_name="Y", quantity=1, total_value=Decimal("0.20")),
        ]
        assert total_line(records) == "Total de Vendas: R$ 0,30"


class TestBuildStory:
    def test_order_of_elements(self, sample_records, clock):
        story = PdfWriter(clock=clock).build_story(sample_records, width=500)

        paragraphs = [f for f in story if isinstance(f, Paragraph)]
        tables = [f for f in story if isinstance(f, Table)]
        assert len(tables) == 1
        assert [p.getPlainText() for p in paragraphs] == [
            "Relatório de Vendas",
            "Gerado em: 31/01/2024 14:05:09",
            "Total de Vendas: R$ 1.500,00",
        ]
        assert story.index(tables[0]) < story.index(paragraphs[-1])

    def test_table_repeats_header(self, sample_records, clock):
        story = PdfWriter(clock=clock).build_story(sample_records, width=500)
        table = next(f for f in story if isinstance(f, Table))
        assert table.repeatRows == 1

    def test_long_product_name_wraps(self, clock):
        name = ("Produto com nome extenso " * 5).strip()
        assert len(name) >= 120
        records = [SaleRecord(date=datetime(2024, 1, 1), product_name=name, quantity=1, total_value=Decimal("1"))]

        story = PdfWriter(clock=clock).build_story(records, width=481.9)
        table = next(f for f in story if isinstance(f, Table))
        table.wrap(481.9, 800)

        header_height, row_height = table._rowHeights
        assert row_height > header_height

    def test_product_markup_is_escaped(self, clock):
        records = [SaleRecord(date=datetime(2024, 1, 1), product_name="Cabo <USB> & Fonte", quantity=1, total_value=Decimal("1"))]
        text = _pdf_text(PdfWriter(clock=clock).render(records))
        assert "Cabo <USB> & Fonte" in text


class TestRender:
    def test_produces_pdf_bytes(self, sample_records, clock):
        content = PdfWriter(clock=clock).render(sample_records)
        assert isinstance(content, bytes)
        assert content.startswith(b"%PDF")

    def test_pdf_text(self, sample_records, clock):
        text = _pdf_text(PdfWriter(clock=clock).render(sample_records))

        assert "Gerado em: 31/01/2024 14:05:09" in text
        for header in TABLE_HEADERS:
            assert header in text
        assert "Produto A" in text
        assert "Produto B" in text
        assert "Total de Vendas: R$ 1.500,00" in text

    def test_empty_records(self, clock):
        text = _pdf_text(PdfWriter(clock=clock).render([]))
        assert "Valor Total" in text
        assert "Total de Vendas: R$ 0,00" in text

    def test_long_table_spans_pages(self, clock):
        records = [
            SaleRecord(date=datetime(2024, 1, 1), product_name=f"Item {i}", quantity=1, total_value=Decimal("1"))
            for i in range(150)
        ]
        reader = PdfReader(BytesIO(PdfWriter(clock=clock).render(records)))

        texts = [page.extract_text() for page in reader.pages]
        assert len(texts) > 1
        for text in texts:
            if "Item" in text:
                assert "Valor Total" in text
        assert "Total de Vendas: R$ 150,00" in texts[-1]
