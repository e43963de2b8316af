"""
EuroAlt FastAPI main
"""

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from euroalt import __version__
from euroalt.config import settings, configure_logging
from euroalt.api.routes import router, get_browser
from euroalt.pipeline import CatalogueBrowser

configure_logging()

app = FastAPI(
    title="EuroAlt",
    description="Catalogue of European and open-source alternatives to US tech products",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(router, prefix=settings.API_PREFIX)


@app.get("/")
async def root():
    """Health check"""
    return {
        "name": "EuroAlt",
        "status": "running",
        "version": __version__,
    }


@app.get("/health")
async def health(browser: CatalogueBrowser = Depends(get_browser)):
    """Detailed health check"""
    return {
        "status": "healthy",
        "env": settings.ENV,
        "alternatives": len(browser.catalogue),
    }
