"""Value types passed between the report pipeline stages."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class ReportRequest(BaseModel):
    """Invocation input. Bounds are passed through to the data source as-is."""

    start_date: datetime = Field(alias="StartDate")
    end_date: datetime = Field(alias="EndDate")

    model_config = {"frozen": True, "populate_by_name": True}


class ReportResult(BaseModel):
    """Success envelope returned to the caller."""

    message: str = Field(alias="Message")
    download_url: str = Field(alias="DownloadUrl")

    model_config = {"populate_by_name": True}


@dataclass(frozen=True)
class SaleRecord:
    date: datetime
    product_name: str
    quantity: int
    total_value: Decimal


@dataclass(frozen=True)
class GeneratedReport:
    file_name: str
    content: bytes


@dataclass(frozen=True)
class DownloadLink:
    url: str
    expires_at: datetime
