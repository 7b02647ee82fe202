from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from cdnjs_api import __version__
from cdnjs_api.core.config import appConfig, settings
from cdnjs_api.core.logging import configureLogging, requestLogger
from cdnjs_api.middleware.process_time import add_process_time_header
from cdnjs_api.routers.libraries import librariesRouter

import logfire

configureLogging(settings.CDNJS_LOG_FILE, settings.CDNJS_LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    requestLogger.info(f"Starting cdnjs API v{__version__} with {appConfig.searchIndex}")
    yield
    await appConfig.searchIndex.close()


app = FastAPI(
    title="cdnjs API",
    description="Read-only listing and search over the cdnjs library catalog",
    version=__version__,
    lifespan=lifespan
)

if settings.CDNJS_LOGFIRE_ENV and settings.CDNJS_LOGFIRE_TOKEN:
    logfire.configure(
        environment = settings.CDNJS_LOGFIRE_ENV,
        token = settings.CDNJS_LOGFIRE_TOKEN
    )
    logfire.instrument_fastapi(app)


@app.middleware('http')
async def LogRequestMiddleware(
    request: Request,
    call_next
):
    requestPath = request.url.path
    requestUserAgent = request.headers.get("User-Agent")
    if request.client:
        requestClientAddress = request.client.host
    else:
        requestClientAddress = None

    requestLogger.info(f"Path: {requestPath}\tUserAgent: {requestUserAgent}\tIP: {requestClientAddress}")

    response = await call_next(request)
    return response


app.middleware('http')(add_process_time_header)

# added last so it wraps every response, including provider errors
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CDNJS_CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(librariesRouter)


@app.get("/healthz")
def health_check():
    return {"status": "healthy"}
