"""Shared test fixtures."""

import json
import os
import tempfile

import pytest

# Keep log files out of the real home directory
os.environ.setdefault("TOPFORTUNES_HOME", tempfile.mkdtemp(prefix="topfortunes-test-"))

from topfortunes.candidate import Candidate  # noqa: E402


@pytest.fixture
def make_candidate():
    """Factory for Candidates with sensible defaults."""
    def _make(score=100, title="Title", author="someone", timestamp=1477958400):
        return Candidate(score=score, title=title, author=author, timestamp=timestamp)
    return _make


@pytest.fixture
def valid_records():
    """The three-record example: B outranks A on timestamp, C trails."""
    return [
        {"score": 100, "title": "A", "author": "alice", "created_utc": 1000},
        {"score": 100, "title": "B", "author": "bob", "created_utc": "500"},
        {"score": 50, "title": "C", "author": "carol", "created_utc": 1},
    ]


@pytest.fixture
def corpus_text(valid_records):
    """Valid records interleaved with garbage, malformed records and a cut fragment."""
    a, b, c = valid_records
    return "\n".join([
        json.dumps(a),
        "garbage ]] from the upstream grep",
        json.dumps({"score": "high", "title": "D", "author": "dave", "created_utc": 1}),
        '{"score": 7, "title": "cut off mid',
        json.dumps(b),
        json.dumps({"title": "E"}),
        json.dumps(c),
    ])


@pytest.fixture
def corpus_path(tmp_path, corpus_text):
    path = tmp_path / "corpus.json"
    path.write_text(corpus_text, encoding="utf-8")
    return path


@pytest.fixture
def hostile_corpus_text(corpus_text):
    """corpus_text plus fragments that trip json/int limits rather than syntax."""
    return "\n".join([
        json.dumps({"score": 9999, "title": "Z", "author": "zed", "created_utc": "1" * 5000}),
        '{"score": ' + "1" * 5000 + ', "title": "Y", "author": "yan", "created_utc": 1}',
        corpus_text,
        '{"junk": ' + "[" * 100000 + "]" * 100000 + "}",
        json.dumps({"score": 9999, "title": "bad \ud800", "author": "sur", "created_utc": 1}),
    ])
