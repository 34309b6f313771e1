"""FastAPI application."""

from fastapi import FastAPI

from bookoutline.utils.logging_config import configure_logging
from server.routers import outline

configure_logging()

app = FastAPI(title="bookoutline", description="Build book outlines from YAML.")
app.include_router(outline.router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Liveness check."""
    return {"status": "ok"}
