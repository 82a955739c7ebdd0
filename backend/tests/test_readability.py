import pytest
from texttools.services.readability_service import (
    count_syllables,
    count_syllables_in_word,
    flesch_reading_ease,
    reading_level,
)
from texttools.services.analyzer_service import count_sentences, count_words


@pytest.mark.parametrize(
    "word, expected",
    [
        ("the", 1),
        ("a", 1),
        ("reading", 2),
        ("make", 1),  # silent trailing "e"
        ("table", 2),  # "le" is kept
        ("horses", 1),
        ("played", 1),
        ("yellow", 2),  # leading "y" dropped
        ("rhythm", 1),
        ("psst", 1),  # no vowels, floor of one
        ("beautiful", 4),
        ("READING", 2),
    ],
)
def test_count_syllables_in_word(word: str, expected: int):
    """Test the vowel-group syllable heuristic."""
    assert count_syllables_in_word(word) == expected


def test_count_syllables():
    """Test summing syllables over every token."""
    assert count_syllables("The quick brown fox jumps over the lazy dog.") == 11
    assert count_syllables("") == 0


def test_flesch_reading_ease():
    """Test the score formula, rounding and clamping."""
    # 9 words, 1 sentence, 11 syllables -> 94.3
    assert flesch_reading_ease("The quick brown fox jumps over the lazy dog.") == 94

    # Very short words clamp to 100
    assert flesch_reading_ease("The cat sat. The cat ran!") == 100

    # Long words clamp to 0
    hard = "Institutional accountability necessitates comprehensive documentation."
    assert flesch_reading_ease(hard) == 0


def test_flesch_reading_ease_undefined():
    """Test that texts without sentences or words have no score."""
    assert flesch_reading_ease("") is None
    assert flesch_reading_ease("   ") is None
    # One word but no sentence
    assert count_words("...") == 1
    assert count_sentences("...") == 0
    assert flesch_reading_ease("...") is None


@pytest.mark.parametrize(
    "text",
    [
        "Hi.",
        "Supercalifragilisticexpialidocious!",
        "A short one. And a considerably more elaborate, meandering second sentence.",
    ],
)
def test_flesch_reading_ease_range(text: str):
    """Test that any defined score is within 0-100."""
    score = flesch_reading_ease(text)
    assert score is not None
    assert 0 <= score <= 100


@pytest.mark.parametrize(
    "score, expected",
    [
        (None, "-"),
        (100, "5th Grade"),
        (90, "5th Grade"),
        (89, "6th Grade"),
        (80, "6th Grade"),
        (70, "7th Grade"),
        (60, "8th-9th Grade"),
        (50, "10th-12th Grade"),
        (49, "College"),
        (30, "College"),
        (29, "College Graduate"),
        (0, "College Graduate"),
    ],
)
def test_reading_level(score, expected: str):
    """Test that grade thresholds are inclusive lower bounds."""
    assert reading_level(score) == expected
