"""Tolerant decoder for concatenated JSON object dumps.

The corpus is a grep-filtered slice of a submissions dump, so objects arrive
back to back (newline separated or not) and mixed with cut-off fragments.
"""

import json

from .log import get_logger

_decoder = json.JSONDecoder()


class RecordDecoder:
    """Lazily yields each JSON object found in ``text``.

    Fragments that fail to parse are skipped and counted in ``skipped``;
    scanning resumes at the next ``{`` after the point of failure.
    """

    def __init__(self, text: str):
        self.text = text
        self.skipped = 0

    def __iter__(self):
        logger = get_logger("decode")
        text = self.text
        end = len(text)
        pos = text.find("{")
        while pos != -1:
            try:
                obj, stop = _decoder.raw_decode(text, pos)
            except (ValueError, RecursionError) as e:
                # JSONDecodeError, over-long integer literals, runaway nesting
                self.skipped += 1
                logger.debug("Skipping malformed fragment at offset %d: %s", pos, e)
                pos = text.find("{", pos + 1)
                continue
            if isinstance(obj, dict):
                yield obj
            pos = text.find("{", stop) if stop < end else -1


def iter_records(text: str):
    """Shortcut for ``iter(RecordDecoder(text))``."""
    return iter(RecordDecoder(text))
