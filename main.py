"""
Entry point for the contextual-ai service.

Run with:
    uvicorn main:app --reload --port 3000
    python main.py
"""
import uvicorn

from config import get_settings
from contextual_ai.api.main import app

settings = get_settings()

if __name__ == "__main__":
    uvicorn.run(
        "contextual_ai.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
        log_level=settings.log_level.lower(),
    )
