"""PdfWriter — renders sales records into a PDF with ReportLab Platypus."""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from io import BytesIO
from typing import Callable, Sequence
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from salesreport.domain.models import SaleRecord

TITLE = "Relatório de Vendas"
TABLE_HEADERS = ["Data", "Produto", "Quantidade", "Valor Total"]

DATE_FORMAT = "%d/%m/%Y"
TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M:%S"

CENTS = Decimal("0.01")
# en-US grouping -> pt-BR grouping
_BRL_SEPARATORS = str.maketrans({",": ".", ".": ","})

TABLE_STYLE = TableStyle([
    ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#e6e6e6")),
    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
    ("FONTSIZE", (0, 0), (-1, -1), 10),
    ("ALIGN", (2, 1), (-1, -1), "RIGHT"),
    ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
])


def format_currency(value: Decimal) -> str:
    """Format a money amount the Brazilian way, e.g. ``R$ 1.500,00``."""
    amount = Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)
    return f"R$ {amount:,.2f}".translate(_BRL_SEPARATORS)


def total_value(records: Sequence[SaleRecord]) -> Decimal:
    return sum((r.total_value for r in records), Decimal("0"))


def total_line(records: Sequence[SaleRecord]) -> str:
    return f"Total de Vendas: {format_currency(total_value(records))}"


def table_rows(records: Sequence[SaleRecord]) -> list[list[str]]:
    """Header row followed by one row per record."""
    rows = [list(TABLE_HEADERS)]
    for record in records:
        rows.append([
            record.date.strftime(DATE_FORMAT),
            record.product_name,
            str(record.quantity),
            format_currency(record.total_value),
        ])
    return rows


def _build_styles() -> dict[str, ParagraphStyle]:
    sample = getSampleStyleSheet()
    return {
        "title": ParagraphStyle("ReportTitle", parent=sample["Title"], fontSize=20, leading=24, spaceAfter=12),
        "generated": ParagraphStyle("ReportGenerated", parent=sample["BodyText"], fontSize=10, spaceAfter=12),
        "total": ParagraphStyle("ReportTotal", parent=sample["BodyText"], fontSize=12, spaceBefore=12),
        "cell": ParagraphStyle("ReportCell", parent=sample["BodyText"], fontSize=10, leading=12),
    }


class PdfWriter:
    """Writes sale records to an in-memory A4 PDF."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock
        self._styles = _build_styles()

    def render(self, records: Sequence[SaleRecord]) -> bytes:
        """Build the complete report and return the PDF bytes."""
        with BytesIO() as buf:
            doc = SimpleDocTemplate(
                buf,
                pagesize=A4,
                title=TITLE,
                leftMargin=2 * cm,
                rightMargin=2 * cm,
                topMargin=2 * cm,
                bottomMargin=2 * cm,
            )
            doc.build(self.build_story(records, doc.width))
            return buf.getvalue()

    def build_story(self, records: Sequence[SaleRecord], width: float) -> list:
        """Title, generation timestamp, sales table and total line, in that order."""
        generated_at = self._clock().strftime(TIMESTAMP_FORMAT)

        rows = table_rows(records)
        # Product names wrap inside their column
        for row in rows[1:]:
            row[1] = Paragraph(escape(row[1]), self._styles["cell"])

        # Header row repeats on every page; columns share the frame width
        table = Table(rows, colWidths=[width / len(TABLE_HEADERS)] * len(TABLE_HEADERS), repeatRows=1)
        table.setStyle(TABLE_STYLE)

        return [
            Paragraph(TITLE, self._styles["title"]),
            Paragraph(f"Gerado em: {generated_at}", self._styles["generated"]),
            Spacer(1, 0.3 * cm),
            table,
            Paragraph(total_line(records), self._styles["total"]),
        ]
