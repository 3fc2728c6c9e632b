from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cardgrid.api import cards_router, health_router
from cardgrid.config import settings

app = FastAPI(
    title=settings.app_name,
    version=pkg_version("cardgrid"),
    debug=settings.debug,
)

app.include_router(cards_router)
app.include_router(health_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
