import logging
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.requests import Request
from starlette.responses import JSONResponse

from salesreport.api import deps
from salesreport.api.reports import router as reports_router
from salesreport.container import Container

logger = logging.getLogger("salesreport.api")

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = Container()
    container.wire(modules=[deps])
    app.state.container = container
    yield
    container.unwire()


app = FastAPI(title="Sales Report", version=VERSION, lifespan=lifespan)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
    logger.error("Unhandled error on %s %s:\n%s", request.method, request.url.path, "".join(tb))
    return JSONResponse(status_code=500, content={"detail": str(exc)})


app.include_router(reports_router)


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": VERSION}
