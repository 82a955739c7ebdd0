"""
Shared Pydantic schemas used across multiple domains.
"""

from pydantic import BaseModel, Field
from typing import List


class WordCount(BaseModel):
    """A single entry of a word frequency table.

    Attributes:
        word (str): The lower-cased token.
        count (int): Number of occurrences in the text.
    """

    word: str
    count: int = Field(gt=0)


class CharacterCount(BaseModel):
    """A single entry of the character frequency table.

    Attributes:
        character (str): A lower-cased ASCII letter or digit.
        count (int): Number of occurrences in the text.
    """

    character: str
    count: int = Field(gt=0)


class Sentiment(BaseModel):
    """Result of the word-list sentiment heuristic.

    Attributes:
        score (float): (positive - negative) / (positive + negative) * 100.
        label (str): Positive, Negative, Neutral, or "-" for empty text.
    """

    score: float = 0.0
    label: str = "-"


class WordExtremes(BaseModel):
    """Longest and shortest token of a text ("-" when there are none)."""

    longest: str = "-"
    shortest: str = "-"


class ChartSeries(BaseModel):
    """Labels and values for a single bar chart."""

    labels: List[str] = Field(default_factory=list)
    values: List[float] = Field(default_factory=list)


class ChartData(BaseModel):
    """Series for the two charts rendered by the client.

    Attributes:
        word_frequency (ChartSeries): Top-10 word counts.
        time_comparison (ChartSeries): Reading, speaking and skimming minutes.
    """

    word_frequency: ChartSeries = Field(default_factory=ChartSeries)
    time_comparison: ChartSeries = Field(default_factory=ChartSeries)
