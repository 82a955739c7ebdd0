import pytest
from texttools.services.classifier_service import analyze_sentiment, detect_language


def test_detect_language(multi_paragraph_text: str):
    """Test the stop-word ratio language heuristic."""
    # 6 of 19 words are common English words
    assert detect_language(multi_paragraph_text) == "English"
    assert detect_language("Lorem ipsum dolor sit amet") == "English (likely)"
    # Exactly 20% is not enough
    assert detect_language("the one two three four") == "English (likely)"
    assert detect_language("!!!") == "English (likely)"
    assert detect_language("") == "-"
    assert detect_language("   ") == "-"


def test_detect_language_samples_first_fifty_words():
    """Test that only the first 50 tokens are considered."""
    text = " ".join(["zebra"] * 50 + ["the"] * 100)
    assert detect_language(text) == "English (likely)"


@pytest.mark.parametrize(
    "text, label",
    [
        ("good great bad", "Positive"),
        ("bad terrible good", "Negative"),
        ("good bad", "Neutral"),
        ("nothing to see here", "Neutral"),
        # No negation handling
        ("not good", "Positive"),
        # Exact token match only
        ("goodness", "Neutral"),
        ("GREAT", "Positive"),
    ],
)
def test_analyze_sentiment_labels(text: str, label: str):
    """Test the word-list sentiment labels."""
    assert analyze_sentiment(text).label == label


def test_analyze_sentiment_scores(multi_paragraph_text: str):
    """Test the sentiment score formula."""
    # love, wonderful, great vs. problem
    sentiment = analyze_sentiment(multi_paragraph_text)
    assert sentiment.score == 50
    assert sentiment.label == "Positive"

    assert analyze_sentiment("good great bad").score == pytest.approx(100 / 3)
    assert analyze_sentiment("nothing to see here").score == 0

    empty = analyze_sentiment("")
    assert empty.score == 0
    assert empty.label == "-"
