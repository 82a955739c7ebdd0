from typing import Dict
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from texttools.api import analysis, export
from texttools.api.analysis import AnalysisRequest, ensure_text_size
from texttools.core.config import ALLOWED_ORIGINS, HOST, PORT
from texttools.schemas.stats_models import Metrics
from texttools.services.stats_service import compute_metrics


app = FastAPI(
    title="Text Tools API",
    description="API for counting words, estimating reading time, and scoring readability of text.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analysis.router)
app.include_router(export.router)


@app.get("/")
def read_root() -> Dict[str, str]:
    """Root endpoint to check API status.

    Returns:
        Dict[str, str]: Status message and link to docs.
    """
    return {"status": "API is ready", "docs": "/docs"}


@app.post("/analyze")
def analyze_endpoint(request: AnalysisRequest) -> Metrics:
    """Analyzes a block of text.

    Counts words, sentences and paragraphs, estimates timing, scores
    readability and sentiment, and builds the frequency tables and chart data.

    Args:
        request (AnalysisRequest): The request body containing the text to analyze.

    Returns:
        Metrics: The full statistics of the text.
    """
    text = ensure_text_size(request.text)
    return compute_metrics(text)


def run() -> None:
    """Serves the API with uvicorn on the configured host and port."""
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
