from texttools.schemas.common import Sentiment
from texttools.services.analyzer_service import get_words

# Most common English words, used as a crude language signal
COMMON_ENGLISH_WORDS = frozenset(
    [
        "the", "be", "to", "of", "and", "a", "in", "that", "have", "i",
        "it", "for", "not", "on", "with", "he", "as", "you", "do", "at",
    ]
)

POSITIVE_WORDS = frozenset(
    [
        "good", "great", "excellent", "amazing", "wonderful", "fantastic",
        "love", "happy", "joy", "pleased", "delighted", "perfect", "best",
        "awesome", "brilliant", "outstanding", "superb", "marvelous",
        "terrific", "fabulous",
    ]
)

NEGATIVE_WORDS = frozenset(
    [
        "bad", "terrible", "awful", "horrible", "hate", "sad", "angry",
        "disappointed", "worst", "poor", "fail", "failure", "wrong", "error",
        "problem", "issue", "difficult", "hard", "tough", "struggle",
    ]
)

LANGUAGE_SAMPLE_SIZE = 50
ENGLISH_RATIO_THRESHOLD = 0.2
SENTIMENT_THRESHOLD = 20


def detect_language(text: str) -> str:
    """Guesses whether the text is English from its first 50 words.

    This is a placeholder heuristic: it never reports anything but English.

    Args:
        text (str): The text to analyze.

    Returns:
        str: "English" if more than 20% of the sampled words are common English
            words, "English (likely)" otherwise, "-" for empty text.
    """
    if not text or not text.strip():
        return "-"

    words = get_words(text)[:LANGUAGE_SAMPLE_SIZE]
    if not words:
        # Only punctuation or symbols, nothing to sample
        return "English (likely)"

    english_matches = sum(1 for w in words if w in COMMON_ENGLISH_WORDS)
    english_ratio = english_matches / min(len(words), LANGUAGE_SAMPLE_SIZE)

    if english_ratio > ENGLISH_RATIO_THRESHOLD:
        return "English"

    return "English (likely)"


def analyze_sentiment(text: str) -> Sentiment:
    """Scores the text by counting words from fixed positive/negative lists.

    Matching is exact on lower-cased tokens, with no stemming or negation.

    Args:
        text (str): The text to analyze.

    Returns:
        Sentiment: Score in [-100, 100] and its label.
    """
    if not text or not text.strip():
        return Sentiment(score=0, label="-")

    words = get_words(text)
    positive_count = sum(1 for w in words if w in POSITIVE_WORDS)
    negative_count = sum(1 for w in words if w in NEGATIVE_WORDS)

    total = positive_count + negative_count
    if total == 0:
        return Sentiment(score=0, label="Neutral")

    score = ((positive_count - negative_count) / total) * 100

    if score > SENTIMENT_THRESHOLD:
        return Sentiment(score=score, label="Positive")
    if score < -SENTIMENT_THRESHOLD:
        return Sentiment(score=score, label="Negative")
    return Sentiment(score=score, label="Neutral")
