from collections import Counter
from typing import List, Optional, Tuple
import re

from texttools.schemas.common import CharacterCount, ChartSeries, WordCount
from texttools.services.analyzer_service import get_words

COUNTED_CHARACTER_REGEX = re.compile(r"[a-z0-9]")
WHITESPACE_REGEX = re.compile(r"\s")

DEFAULT_TOP_N = 10
MAX_CHARACTERS = 50
CHART_TOP_N = 10


def _ranked(counter: Counter) -> List[Tuple[str, int]]:
    """Orders a frequency table by descending count.

    Counter keeps insertion order and sorted() is stable, so ties stay in
    first-seen order.
    """
    return sorted(counter.items(), key=lambda item: item[1], reverse=True)


def word_frequency(text: str) -> Counter:
    """Builds the frequency table of lower-cased tokens, in first-seen order."""
    return Counter(get_words(text))


def most_frequent_words(text: str, top_n: int = DEFAULT_TOP_N) -> List[WordCount]:
    """Returns the most frequent words of the text.

    Args:
        text (str): The text to analyze.
        top_n (int): Maximum number of entries to return.

    Returns:
        List[WordCount]: Entries sorted by descending count.

    Raises:
        ValueError: If top_n is negative.
    """
    if top_n < 0:
        raise ValueError("top_n must not be negative")

    ranked = _ranked(word_frequency(text))
    return [WordCount(word=w, count=c) for w, c in ranked[:top_n]]


def character_frequency(text: str) -> List[CharacterCount]:
    """Counts ASCII letters and digits, case-insensitively.

    Punctuation, symbols and non-ASCII letters are ignored.

    Args:
        text (str): The text to analyze.

    Returns:
        List[CharacterCount]: The 50 most frequent characters, by descending count.
    """
    if not text:
        return []

    clean_text = WHITESPACE_REGEX.sub("", text.lower())
    counter = Counter(ch for ch in clean_text if COUNTED_CHARACTER_REGEX.match(ch))

    ranked = _ranked(counter)[:MAX_CHARACTERS]
    return [CharacterCount(character=ch, count=c) for ch, c in ranked]


def duplicate_words(text: str, limit: Optional[int] = None) -> List[WordCount]:
    """Returns every word that appears more than once.

    Args:
        text (str): The text to analyze.
        limit (Optional[int]): Optional display truncation, none by default.

    Returns:
        List[WordCount]: Repeated words sorted by descending count.
    """
    ranked = [(w, c) for w, c in _ranked(word_frequency(text)) if c > 1]

    if limit is not None:
        ranked = ranked[:limit]

    return [WordCount(word=w, count=c) for w, c in ranked]


def word_frequency_series(text: str) -> ChartSeries:
    """Builds the top-10 word frequency chart (empty when there are no words)."""
    top_words = most_frequent_words(text, CHART_TOP_N)
    return ChartSeries(
        labels=[item.word for item in top_words],
        values=[item.count for item in top_words],
    )
