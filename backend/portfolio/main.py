import asyncio
import sys
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from loguru import logger

from .config import get_settings
from .content import CONTENT
from .datasources.github_adapter import GitHubAdapter
from .render import render_github_panel, render_page
from .schemas import GitHubPanel, PortfolioContent
from .services.profile_loader import ProfileDataAggregator

settings = get_settings()


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


github = GitHubAdapter()
aggregator = ProfileDataAggregator(github, username=settings.github_username)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    # page activation: one load per process start, refreshed only on request
    activation = asyncio.create_task(aggregator.load(settings.github_username))
    try:
        yield
    finally:
        # the cycle must stop before its client is closed
        await aggregator.aclose()
        activation.cancel()
        await asyncio.gather(activation, return_exceptions=True)
        await github.aclose()


app = FastAPI(title="Portfolio", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@app.get("/", response_class=HTMLResponse)
async def index():
    return HTMLResponse(render_page(CONTENT, aggregator.snapshot()))


@app.get("/api/content", response_model=PortfolioContent)
async def content():
    return CONTENT


@app.get("/api/github", response_model=GitHubPanel)
async def github_panel():
    return aggregator.snapshot()


@app.get("/api/github/panel", response_class=HTMLResponse)
async def github_panel_fragment():
    return HTMLResponse(render_github_panel(aggregator.snapshot()))


@app.post("/api/github/refresh", response_model=GitHubPanel)
async def refresh_github():
    await aggregator.load(settings.github_username)
    return aggregator.snapshot()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("portfolio.main:app", host="0.0.0.0", port=8020)
