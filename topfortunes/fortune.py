"""Fortune-file rendering: wrapped title, attribution line, % delimiter."""

import textwrap
from datetime import datetime, timezone

from .candidate import Candidate
from .config import ATTRIBUTION_DASH, DELIMITER, WRAP_WIDTH

# Fixed English abbreviations; %b would follow the process locale
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def wrap(text: str, width: int = WRAP_WIDTH) -> list[str]:
    """Greedy fill at ``width`` columns, breaking only at whitespace.

    Words longer than ``width`` are kept whole on a line of their own.
    """
    wrapper = textwrap.TextWrapper(
        width=width,
        break_long_words=False,
        break_on_hyphens=False,
    )
    return wrapper.wrap(text)


def month_year(timestamp: int) -> str:
    """Render an epoch timestamp as e.g. 'Nov 2016' (UTC)."""
    dt = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    return f"{MONTHS[dt.month - 1]} {dt.year:04d}"


def format_entry(candidate: Candidate) -> str:
    lines = wrap(candidate.title)
    lines.append(f"\t{ATTRIBUTION_DASH}{candidate.author}, {month_year(candidate.timestamp)}")
    lines.append(DELIMITER)
    return "\n".join(lines) + "\n"
