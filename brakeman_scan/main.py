from contextlib import asynccontextmanager

from fastapi import FastAPI

from brakeman_scan.api.scan_routes import router as scan_router
from brakeman_scan.core.config import VERSION
from brakeman_scan.core.logging import setup_logging


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging()
    yield


tags_metadata = [
    {
        "name": "scan",
        "description": "Detect the format of a Brakeman report and normalize its warnings.",
    },
    {
        "name": "health",
        "description": "Liveness probe for container orchestration.",
    },
]

app = FastAPI(
    title="Brakeman Report Scanner",
    version=VERSION,
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.include_router(scan_router)


@app.get("/health", tags=["health"], summary="Health check")
def health() -> dict[str, str]:
    return {"status": "healthy", "version": VERSION}
