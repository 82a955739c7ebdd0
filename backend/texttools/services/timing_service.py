import math
import re
from typing import Dict

from texttools.schemas.common import ChartSeries

# Words per minute for each preset
READING_WPM = 200
SPEAKING_WPM = 150
SKIMMING_WPM = 400

TIME_CHART_LABELS = ["Reading Time", "Speaking Time", "Skimming Time"]

# Chart value used for the "< 1 min" label
UNDER_A_MINUTE = 0.5

MINUTES_REGEX = re.compile(r"(\d+)")


def estimate_time(word_count: int, words_per_minute: float) -> str:
    """Formats the time needed to get through a number of words.

    Anything in [1, 2) minutes is reported as "1 min"; from 2 minutes on the
    value is rounded up.

    Args:
        word_count (int): Number of words.
        words_per_minute (float): Speed in words per minute.

    Returns:
        str: "< 1 min", "1 min" or "{n} min".

    Raises:
        ValueError: If words_per_minute is not positive or the estimate is
            too large to represent.
    """
    if words_per_minute <= 0:
        raise ValueError("words_per_minute must be positive")

    try:
        minutes = word_count / words_per_minute
    except OverflowError:
        raise ValueError("time estimate is too large") from None

    if not math.isfinite(minutes):
        raise ValueError("time estimate is too large")

    if minutes < 1:
        return "< 1 min"
    elif minutes < 2:
        return "1 min"
    return f"{math.ceil(minutes)} min"


def reading_time(word_count: int) -> str:
    return estimate_time(word_count, READING_WPM)


def speaking_time(word_count: int) -> str:
    return estimate_time(word_count, SPEAKING_WPM)


def skimming_time(word_count: int) -> str:
    return estimate_time(word_count, SKIMMING_WPM)


def estimate_all(word_count: int) -> Dict[str, str]:
    """Returns the reading, speaking and skimming labels for a word count."""
    return {
        "reading_time": reading_time(word_count),
        "speaking_time": speaking_time(word_count),
        "skimming_time": skimming_time(word_count),
    }


def time_label_to_minutes(label: str) -> float:
    """Converts a time label back to a number for charting.

    Args:
        label (str): A label produced by estimate_time.

    Returns:
        float: 0.5 for "< 1 min", otherwise the minutes in the label (0 if none).
    """
    if label == "< 1 min":
        return UNDER_A_MINUTE

    match = MINUTES_REGEX.search(label)
    return float(match.group(1)) if match else 0.0


def time_chart_series(word_count: int) -> ChartSeries:
    """Builds the reading/speaking/skimming comparison chart.

    The chart is empty when there are no words.
    """
    if word_count == 0:
        return ChartSeries()

    times = estimate_all(word_count)
    values = [
        time_label_to_minutes(times["reading_time"]),
        time_label_to_minutes(times["speaking_time"]),
        time_label_to_minutes(times["skimming_time"]),
    ]
    return ChartSeries(labels=list(TIME_CHART_LABELS), values=values)
