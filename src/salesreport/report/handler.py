"""ReportHandler — orchestrates fetch → render → upload → presign."""

import logging
from datetime import datetime, timedelta
from typing import Callable

from salesreport.domain.models import GeneratedReport, ReportRequest, ReportResult
from salesreport.infra.storage import ObjectStore
from salesreport.report.data_source import SalesDataSource
from salesreport.report.pdf_writer import PdfWriter

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Relatório gerado com sucesso"
DEFAULT_EXPIRY = timedelta(hours=1)


def report_file_name(now: datetime, prefix: str = "relatorio") -> str:
    """Second-granularity name, e.g. ``relatorio_20240131_140509.pdf``."""
    return f"{prefix}_{now.strftime('%Y%m%d_%H%M%S')}.pdf"


class ReportHandler:
    """Runs one report invocation. Holds no state between calls."""

    def __init__(
        self,
        data_source: SalesDataSource,
        renderer: PdfWriter,
        object_store: ObjectStore,
        bucket: str,
        expiry: timedelta = DEFAULT_EXPIRY,
        prefix: str = "relatorio",
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._data_source = data_source
        self._renderer = renderer
        self._object_store = object_store
        self._bucket = bucket
        self._expiry = expiry
        self._prefix = prefix
        self._clock = clock

    async def handle(self, request: ReportRequest) -> ReportResult:
        """Generate, upload and link a sales report for the requested period.

        Any failure is logged and re-raised as-is. An object already uploaded
        before a later failure stays in the bucket.
        """
        logger.info("Generating report for period %s to %s", request.start_date, request.end_date)

        try:
            records = await self._data_source.fetch(request.start_date, request.end_date)
            content = self._renderer.render(records)
            report = GeneratedReport(file_name=report_file_name(self._clock(), self._prefix), content=content)

            self._object_store.put(self._bucket, report.file_name, report.content)
            link = self._object_store.presign(self._bucket, report.file_name, self._expiry)
        except Exception as e:
            logger.error("Report generation failed: %s", e)
            raise

        logger.info("Report %s ready (%d rows), link expires at %s", report.file_name, len(records), link.expires_at)
        return ReportResult(message=SUCCESS_MESSAGE, download_url=link.url)
