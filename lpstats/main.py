from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lpstats.api.routers.lp_stats import router as lp_stats_router
from lpstats.api.routers.market_stats import router as market_stats_router
from lpstats.shared.config import get_settings


settings = get_settings()
logging.basicConfig(level=settings.log_level)

app = FastAPI(title="LP Stats API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(lp_stats_router)
app.include_router(market_stats_router)


@app.get("/health")
def health():
    return {"status": "ok"}
