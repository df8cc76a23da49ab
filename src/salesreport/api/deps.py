from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from salesreport.container import Container
from salesreport.report.handler import ReportHandler


@inject
def get_report_handler(
    handler: ReportHandler = Depends(Provide[Container.handler]),
) -> ReportHandler:
    return handler
