"""Reports API — local HTTP surface for the report handler."""

from typing import Annotated

from fastapi import APIRouter, Depends

from salesreport.api.deps import get_report_handler
from salesreport.domain.models import ReportRequest, ReportResult
from salesreport.report.handler import ReportHandler

router = APIRouter(prefix="/api/reports", tags=["reports"])

HandlerDep = Annotated[ReportHandler, Depends(get_report_handler)]


@router.post("/generate", response_model=ReportResult)
async def generate_report(body: ReportRequest, handler: HandlerDep) -> ReportResult:
    """Generate a sales report PDF and return a presigned download link."""
    return await handler.handle(body)
