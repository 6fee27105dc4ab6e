import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routes.eligibility import DEFAULT_DISPLAY_MAX, router as eligibility_router

load_dotenv()

logging.basicConfig(
    level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def _display_max() -> int:
    raw = os.getenv("CRS_DISPLAY_MAX")
    if not raw:
        return DEFAULT_DISPLAY_MAX
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid CRS_DISPLAY_MAX={raw!r}, using {DEFAULT_DISPLAY_MAX}")
        return DEFAULT_DISPLAY_MAX


app = FastAPI(
    docs_url="/api/v1/docs",
    redoc_url="/api/v1/redoc",
    openapi_url="/api/v1/openapi.json"
)

app.include_router(eligibility_router, prefix="/api/v1/eligibility")

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ORIGINS", "http://localhost:5173").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.state.display_max = _display_max()


@app.get("/health")
async def health():
    return {"status": "ok"}
