import re
from typing import List

# Compile regex once at module level for performance
WORD_REGEX = re.compile(r"\b\w+\b")
WHITESPACE_REGEX = re.compile(r"\s+")
SENTENCE_END_REGEX = re.compile(r"[.!?]+")
# A blank line, possibly containing other whitespace
PARAGRAPH_BREAK_REGEX = re.compile(r"\n\s*\n")


def _is_blank(text: str) -> bool:
    return not text or not text.strip()


def count_words(text: str) -> int:
    """Counts whitespace-separated fragments in the text.

    Args:
        text (str): The text to analyze.

    Returns:
        int: Number of words, 0 for empty or whitespace-only text.
    """
    if _is_blank(text):
        return 0

    return len([w for w in WHITESPACE_REGEX.split(text.strip()) if w])


def get_words(text: str) -> List[str]:
    """Extracts lower-cased word tokens in the order they appear.

    Args:
        text (str): The text to tokenize.

    Returns:
        List[str]: Runs of word characters (letters, digits, underscore).
    """
    if _is_blank(text):
        return []

    return WORD_REGEX.findall(text.lower())


def count_characters(text: str) -> int:
    """Counts every character, whitespace included."""
    return len(text) if text else 0


def count_characters_no_spaces(text: str) -> int:
    """Counts characters after removing all whitespace."""
    if not text:
        return 0

    return len(WHITESPACE_REGEX.sub("", text))


def count_unique_words(text: str) -> int:
    return len(set(get_words(text)))


def count_lines(text: str) -> int:
    """Counts newline-delimited segments.

    A trailing newline adds one more (empty) line.

    Args:
        text (str): The text to analyze.

    Returns:
        int: Number of lines, 0 for empty or whitespace-only text.
    """
    if _is_blank(text):
        return 0

    return len(text.split("\n"))


def count_sentences(text: str) -> int:
    """Counts non-empty segments between runs of '.', '!' and '?'.

    Args:
        text (str): The text to analyze.

    Returns:
        int: Number of sentences, 0 for empty or whitespace-only text.
    """
    if _is_blank(text):
        return 0

    sentences = SENTENCE_END_REGEX.split(text.strip())
    return len([s for s in sentences if s.strip()])


def count_paragraphs(text: str) -> int:
    """Counts blocks of text separated by blank lines.

    Text without any blank line still counts as a single paragraph.

    Args:
        text (str): The text to analyze.

    Returns:
        int: Number of paragraphs, 0 for empty or whitespace-only text.
    """
    if _is_blank(text):
        return 0

    paragraphs = PARAGRAPH_BREAK_REGEX.split(text.strip())
    count = len([p for p in paragraphs if p.strip()])
    return count if count > 0 else 1
