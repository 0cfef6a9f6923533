from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .config import settings
from .logging import setup_logging
from .api.routes import router as api_router

setup_logging()
app = FastAPI(title="portfolio-analytics")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list(), allow_methods=["GET"], allow_headers=["*"],
)
app.include_router(api_router)
