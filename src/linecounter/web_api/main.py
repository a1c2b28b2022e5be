"""
FastAPI Application
===================
Main entry point for the linecounter API.

Run with:
    uvicorn linecounter.web_api.main:app --reload
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from linecounter import __version__
from linecounter.web_api.config import settings
from linecounter.web_api.routers import count, health

app = FastAPI(
    title="Line Counter API",
    description="Count non-blank lines in source trees",
    version=__version__,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(health.router, tags=["Health"])
app.include_router(count.router, prefix="/count", tags=["Count"])


@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "name": "Line Counter API",
        "version": __version__,
        "docs": "/docs" if settings.debug else "disabled",
    }


# For running directly: python -m linecounter.web_api.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
