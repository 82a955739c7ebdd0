from typing import Optional, List, Dict
from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from texttools.core.config import DEFAULT_TOP_WORDS, MAX_TEXT_LENGTH, MAX_TOP_WORDS
from texttools.schemas.common import CharacterCount, WordCount
from texttools.schemas.stats_models import TimeEstimates
from texttools.services.analyzer_service import count_words
from texttools.services.frequency_service import (
    character_frequency,
    duplicate_words,
    most_frequent_words,
)
from texttools.services.timing_service import estimate_all, estimate_time

router = APIRouter(prefix="/analyze", tags=["Analysis"])


class AnalysisRequest(BaseModel):
    """Request model for text analysis."""

    text: str


def ensure_text_size(text: str) -> str:
    """Rejects texts larger than the configured limit.

    Args:
        text (str): The submitted text.

    Returns:
        str: The unchanged text.

    Raises:
        HTTPException: If the text exceeds MAX_TEXT_LENGTH characters.
    """
    if len(text) > MAX_TEXT_LENGTH:
        raise HTTPException(
            status_code=413,
            detail=f"Text exceeds the maximum of {MAX_TEXT_LENGTH} characters",
        )
    return text


@router.post("/words")
def top_words_endpoint(
    request: AnalysisRequest,
    top_n: int = Query(DEFAULT_TOP_WORDS, ge=1, le=MAX_TOP_WORDS),
) -> Dict[str, List[WordCount]]:
    """Returns the most frequent words of the text.

    Args:
        request (AnalysisRequest): The text to analyze.
        top_n (int): Number of words to return.

    Returns:
        Dict[str, List[WordCount]]: Words sorted by descending count.
    """
    text = ensure_text_size(request.text)
    return {"words": most_frequent_words(text, top_n)}


@router.post("/characters")
def character_frequency_endpoint(
    request: AnalysisRequest,
) -> Dict[str, List[CharacterCount]]:
    """Returns the frequency of letters and digits (top 50)."""
    text = ensure_text_size(request.text)
    return {"characters": character_frequency(text)}


@router.post("/duplicates")
def duplicate_words_endpoint(
    request: AnalysisRequest,
    limit: Optional[int] = Query(None, ge=1),
) -> Dict[str, List[WordCount]]:
    """Returns the words that appear more than once.

    Args:
        request (AnalysisRequest): The text to analyze.
        limit (Optional[int]): Maximum number of entries, all by default.

    Returns:
        Dict[str, List[WordCount]]: Repeated words sorted by descending count.
    """
    text = ensure_text_size(request.text)
    return {"duplicates": duplicate_words(text, limit=limit)}


@router.post("/time")
def time_estimate_endpoint(
    request: AnalysisRequest,
    words_per_minute: Optional[float] = Query(None, ge=1),
) -> TimeEstimates:
    """Estimates reading, speaking and skimming time for the text.

    If words_per_minute is given, only the estimate at that speed is returned.

    Args:
        request (AnalysisRequest): The text to analyze.
        words_per_minute (Optional[float]): A custom speed.

    Returns:
        TimeEstimates: The time labels.
    """
    text = ensure_text_size(request.text)
    word_count = count_words(text)

    if words_per_minute is not None:
        return TimeEstimates(
            word_count=word_count,
            custom_time=estimate_time(word_count, words_per_minute),
            words_per_minute=words_per_minute,
        )

    return TimeEstimates(word_count=word_count, **estimate_all(word_count))
