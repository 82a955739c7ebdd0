from decimal import Decimal, ROUND_HALF_UP
from typing import List

from texttools.schemas.common import ChartData, WordExtremes
from texttools.schemas.stats_models import Metrics
from texttools.services.analyzer_service import (
    count_characters,
    count_characters_no_spaces,
    count_lines,
    count_paragraphs,
    count_sentences,
    count_unique_words,
    count_words,
    get_words,
)
from texttools.services.classifier_service import analyze_sentiment, detect_language
from texttools.services.frequency_service import (
    character_frequency,
    duplicate_words,
    most_frequent_words,
    word_frequency_series,
)
from texttools.services.readability_service import (
    count_syllables,
    flesch_reading_ease,
    reading_level,
)
from texttools.services.timing_service import estimate_all, time_chart_series

ONE_DECIMAL = Decimal("0.1")


def round_one_decimal(value: float) -> float:
    """Rounds to one fractional digit, halves away from zero.

    Works on the exact binary value of the float, so 0.25 -> 0.3 but
    0.35 (stored as 0.3499...) -> 0.3.

    Args:
        value (float): The value to round.

    Returns:
        float: The rounded value.
    """
    return float(Decimal(value).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP))


def average_word_length(text: str) -> float:
    """Calculates the mean character length of the word tokens.

    Args:
        text (str): The text to analyze.

    Returns:
        float: Average length with one decimal, 0 if there are no words.
    """
    words = get_words(text)
    if not words:
        return 0.0

    total_length = sum(len(w) for w in words)
    return round_one_decimal(total_length / len(words))


def average_sentence_length(text: str) -> float:
    """Calculates the average number of words per sentence."""
    sentence_count = count_sentences(text)
    if sentence_count == 0:
        return 0.0

    return round_one_decimal(count_words(text) / sentence_count)


def average_words_per_paragraph(text: str) -> float:
    paragraph_count = count_paragraphs(text)
    if paragraph_count == 0:
        return 0.0

    return round_one_decimal(count_words(text) / paragraph_count)


def find_longest_and_shortest_words(text: str) -> WordExtremes:
    """Finds the longest and shortest tokens of the text.

    Ties go to the word that appears first, since sorted() is stable.

    Args:
        text (str): The text to analyze.

    Returns:
        WordExtremes: Lower-cased longest and shortest words, "-" if none.
    """
    words: List[str] = get_words(text)
    if not words:
        return WordExtremes()

    longest = sorted(words, key=len, reverse=True)[0]
    shortest = sorted(words, key=len)[0]

    return WordExtremes(longest=longest, shortest=shortest)


def compute_metrics(text: str) -> Metrics:
    """Generates the full statistical analysis of the text.

    Every field is recomputed from scratch; the same text always yields the
    same Metrics.

    Args:
        text (str): The raw text, possibly empty.

    Returns:
        Metrics: All counts, estimates, scores and frequency tables.
    """
    text = text or ""

    word_count = count_words(text)

    # Readability
    flesch_score = flesch_reading_ease(text)

    extremes = find_longest_and_shortest_words(text)

    charts = ChartData(
        word_frequency=word_frequency_series(text),
        time_comparison=time_chart_series(word_count),
    )

    return Metrics(
        word_count=word_count,
        character_count=count_characters(text),
        character_count_no_spaces=count_characters_no_spaces(text),
        sentence_count=count_sentences(text),
        paragraph_count=count_paragraphs(text),
        line_count=count_lines(text),
        unique_word_count=count_unique_words(text),
        syllable_count=count_syllables(text),
        **estimate_all(word_count),
        average_word_length=average_word_length(text),
        average_sentence_length=average_sentence_length(text),
        average_words_per_paragraph=average_words_per_paragraph(text),
        longest_word=extremes.longest,
        shortest_word=extremes.shortest,
        flesch_reading_ease=flesch_score,
        reading_level=reading_level(flesch_score),
        language=detect_language(text),
        sentiment=analyze_sentiment(text),
        top_words=most_frequent_words(text),
        character_frequency=character_frequency(text),
        duplicate_words=duplicate_words(text),
        charts=charts,
    )
