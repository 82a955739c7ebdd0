import math
import re
from typing import Optional

from texttools.services.analyzer_service import count_sentences, count_words, get_words

# Trailing "es"/"e" after a consonant (other than "l"), or any trailing "ed"
SILENT_SUFFIX_REGEX = re.compile(r"(?:[^laeiouy]es|ed|[^laeiouy]e)$")
LEADING_Y_REGEX = re.compile(r"^y")
VOWEL_GROUP_REGEX = re.compile(r"[aeiouy]{1,2}")

# Flesch Reading Ease coefficients
FLESCH_BASE = 206.835
FLESCH_SENTENCE_WEIGHT = 1.015
FLESCH_SYLLABLE_WEIGHT = 84.6

# Inclusive lower bounds, checked from the top
READING_LEVELS = [
    (90, "5th Grade"),
    (80, "6th Grade"),
    (70, "7th Grade"),
    (60, "8th-9th Grade"),
    (50, "10th-12th Grade"),
    (30, "College"),
]
LOWEST_READING_LEVEL = "College Graduate"


def count_syllables_in_word(word: str) -> int:
    """Estimates the number of syllables in a single word.

    Words of three letters or fewer count as one syllable. Otherwise a silent
    suffix and a leading "y" are dropped and the remaining groups of one or two
    vowels are counted, with a floor of one.

    Args:
        word (str): The word to analyze.

    Returns:
        int: The estimated syllable count (at least 1).
    """
    word = word.lower()
    if len(word) <= 3:
        return 1

    word = SILENT_SUFFIX_REGEX.sub("", word, count=1)
    word = LEADING_Y_REGEX.sub("", word, count=1)

    vowel_groups = VOWEL_GROUP_REGEX.findall(word)
    return len(vowel_groups) if vowel_groups else 1


def count_syllables(text: str) -> int:
    return sum(count_syllables_in_word(w) for w in get_words(text))


def flesch_reading_ease(text: str) -> Optional[int]:
    """Calculates the Flesch Reading Ease score of the text.

    Args:
        text (str): The text to analyze.

    Returns:
        Optional[int]: The score rounded and clamped to 0-100, or None if the
            text has no sentences or no words.
    """
    sentences = count_sentences(text)
    words = count_words(text)

    if sentences == 0 or words == 0:
        return None

    syllables = count_syllables(text)

    avg_sentence_length = words / sentences
    avg_syllables_per_word = syllables / words

    score = (
        FLESCH_BASE
        - (FLESCH_SENTENCE_WEIGHT * avg_sentence_length)
        - (FLESCH_SYLLABLE_WEIGHT * avg_syllables_per_word)
    )

    # Halves round up, e.g. 72.5 -> 73 and -0.5 -> 0
    rounded = math.floor(score + 0.5)
    return max(0, min(100, rounded))


def reading_level(score: Optional[float]) -> str:
    """Maps a Flesch score to a US school grade label.

    Args:
        score (Optional[float]): The Flesch Reading Ease score.

    Returns:
        str: The grade label, or "-" when there is no score.
    """
    if score is None:
        return "-"

    for threshold, label in READING_LEVELS:
        if score >= threshold:
            return label

    return LOWEST_READING_LEVEL
