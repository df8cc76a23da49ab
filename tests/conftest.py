from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from salesreport.domain.models import DownloadLink, SaleRecord

FIXED_NOW = datetime(2024, 1, 31, 14, 5, 9)


@pytest.fixture()
def clock():
    return lambda: FIXED_NOW


@pytest.fixture()
def sample_records() -> list[SaleRecord]:
    return [
        SaleRecord(date=datetime(2024, 1, 31, 10, 0), product_name="Produto A", quantity=10, total_value=Decimal("1000")),
        SaleRecord(date=datetime(2024, 1, 30, 10, 0), product_name="Produto B", quantity=5, total_value=Decimal("500")),
    ]


@pytest.fixture()
def mock_store():
    store = MagicMock()
    store.presign.return_value = DownloadLink(
        url="https://bucket.s3.amazonaws.com/relatorio.pdf?X-Amz-Signature=abc",
        expires_at=datetime(2024, 1, 31, 15, 5, 9),
    )
    return store


@pytest.fixture()
def fixed_now() -> datetime:
    return FIXED_NOW
