"""
Pydantic schemas for validating text statistics data structures.
"""

from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional
from .common import CharacterCount, ChartData, Sentiment, WordCount


class Metrics(BaseModel):
    """Complete statistics for a single text snapshot.

    This schema defines the contract for statistics returned by the analysis service.
    """

    model_config = ConfigDict(frozen=True)

    # Core Counts
    word_count: int = Field(ge=0)
    character_count: int = Field(ge=0)
    character_count_no_spaces: int = Field(ge=0)
    sentence_count: int = Field(ge=0)
    paragraph_count: int = Field(ge=0)
    line_count: int = Field(ge=0)
    unique_word_count: int = Field(ge=0)
    syllable_count: int = Field(ge=0)

    # Timing
    reading_time: str
    speaking_time: str
    skimming_time: str

    # Lexical
    average_word_length: float = 0.0
    average_sentence_length: float = 0.0
    average_words_per_paragraph: float = 0.0
    longest_word: str = "-"
    shortest_word: str = "-"

    # Readability
    flesch_reading_ease: Optional[int] = Field(default=None, ge=0, le=100)
    reading_level: str = "-"

    # Classification
    language: str = "-"
    sentiment: Sentiment = Field(default_factory=Sentiment)

    # Frequency tables
    top_words: List[WordCount] = Field(default_factory=list)
    character_frequency: List[CharacterCount] = Field(default_factory=list)
    duplicate_words: List[WordCount] = Field(default_factory=list)

    # Charts
    charts: ChartData = Field(default_factory=ChartData)


class TimeEstimates(BaseModel):
    """Time labels for a word count at the preset (or a custom) speed."""

    word_count: int = Field(ge=0)
    reading_time: Optional[str] = None
    speaking_time: Optional[str] = None
    skimming_time: Optional[str] = None
    custom_time: Optional[str] = None
    words_per_minute: Optional[float] = None
