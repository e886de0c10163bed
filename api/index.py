"""
Vercel serverless entry point for the portfolio site
"""
import sys
from pathlib import Path

# backend/ holds the portfolio package when deployed without installing it
backend_path = Path(__file__).parent.parent / "backend"
sys.path.insert(0, str(backend_path))

from portfolio.main import app

from mangum import Mangum

# lifespan runs on cold start so each fresh instance activates one GitHub load
mangum_handler = Mangum(app, lifespan="auto")


def handler(event, context=None):
    """Vercel serverless function handler"""
    return mangum_handler(event, context)
