"""Input loading (file, stdin, or URL) and all-at-once output writing."""

import os
import sys
from pathlib import Path

import requests

from .log import get_logger
from .retry import with_retry

USER_AGENT = "topfortunes/1.0"


class IOFailure(OSError):
    """Input could not be read or output could not be written. Fatal."""


@with_retry(max_retries=3, base_delay=2.0, retry_on=(requests.ConnectionError, requests.Timeout))
def _fetch(url: str, timeout: float) -> str:
    r = requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=timeout)
    r.raise_for_status()
    r.encoding = "utf-8"
    return r.text


def read_input(location: str, timeout: float = 30) -> str:
    """Read the whole corpus from ``location``.

    ``-`` is stdin, ``http(s)://`` URLs are fetched, anything else is a
    UTF-8 file path.
    """
    logger = get_logger("source")
    if location == "-":
        try:
            return sys.stdin.buffer.read().decode("utf-8")
        except (OSError, UnicodeError) as e:
            raise IOFailure(f"cannot read stdin: {e}") from e

    if location.startswith(("http://", "https://")):
        logger.debug("Fetching %s", location)
        try:
            return _fetch(location, timeout)
        except requests.RequestException as e:
            raise IOFailure(f"cannot fetch {location}: {e}") from e

    try:
        return Path(location).read_text(encoding="utf-8")
    except (OSError, UnicodeError) as e:
        raise IOFailure(f"cannot read {location}: {e}") from e


def write_output(entries, location: str):
    """Write formatted entries to ``location`` (``-`` for stdout).

    Files are written to a temporary sibling and moved into place, so a
    failed run never leaves a truncated output file behind.
    """
    text = "".join(entries)
    if location == "-":
        # Bypass the text layer so the locale encoding never applies
        try:
            sys.stdout.flush()
            sys.stdout.buffer.write(text.encode("utf-8"))
            sys.stdout.buffer.flush()
        except (OSError, UnicodeError) as e:
            raise IOFailure(f"cannot write stdout: {e}") from e
        return

    path = Path(location)
    tmp = path.with_name(f".{path.name}.tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(text, encoding="utf-8")
        os.replace(tmp, path)
    except (OSError, UnicodeError) as e:
        if tmp.exists():
            tmp.unlink()
        raise IOFailure(f"cannot write {location}: {e}") from e
    get_logger("source").debug("Wrote %d bytes to %s", len(text.encode("utf-8")), path)
