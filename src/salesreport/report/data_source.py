"""Sales data sources consumed by the report handler."""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Callable

from salesreport.domain.models import SaleRecord


class SalesDataSource(ABC):
    """Supplies the sales rows for a reporting period."""

    @abstractmethod
    async def fetch(self, start: datetime, end: datetime) -> list[SaleRecord]:
        """Return the sale records between start and end (bounds are opaque)."""


class StubSalesDataSource(SalesDataSource):
    """Placeholder source with two fixed sales. Ignores the requested period."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock

    async def fetch(self, start: datetime, end: datetime) -> list[SaleRecord]:
        now = self._clock()
        return [
            SaleRecord(date=now, product_name="Produto A", quantity=10, total_value=Decimal("1000")),
            SaleRecord(date=now - timedelta(days=1), product_name="Produto B", quantity=5, total_value=Decimal("500")),
        ]
