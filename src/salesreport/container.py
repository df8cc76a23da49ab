from datetime import timedelta

import boto3
from botocore.config import Config
from dependency_injector import containers, providers

from salesreport.config import Settings
from salesreport.infra.storage import S3ObjectStore
from salesreport.report.data_source import StubSalesDataSource
from salesreport.report.handler import ReportHandler
from salesreport.report.pdf_writer import PdfWriter


class Container(containers.DeclarativeContainer):
    settings = providers.Singleton(Settings)

    s3_client = providers.Singleton(
        boto3.client,
        "s3",
        region_name=settings.provided.aws_region,
        config=providers.Singleton(Config, signature_version="s3v4"),
    )

    data_source = providers.Singleton(StubSalesDataSource)

    renderer = providers.Singleton(PdfWriter)

    object_store = providers.Singleton(
        S3ObjectStore,
        client=s3_client,
    )

    handler = providers.Factory(
        ReportHandler,
        data_source=data_source,
        renderer=renderer,
        object_store=object_store,
        bucket=settings.provided.output_bucket,
        expiry=providers.Factory(timedelta, seconds=settings.provided.presign_expiry_seconds),
        prefix=settings.provided.report_prefix,
    )
