"""One selection run: decode -> normalize -> select -> finalize."""

import time
from dataclasses import dataclass

from .candidate import Candidate, MalformedRecord, normalize, rank_key
from .config import DEFAULT_K, DEFAULT_STRATEGY
from .decode import RecordDecoder
from .fortune import format_entry
from .log import get_logger
from .selectors import STRATEGIES, make_selector


@dataclass
class RunStats:
    """Counters for a single run. Nothing here outlives the call."""
    strategy: str
    k: int
    fragments_skipped: int = 0
    records_decoded: int = 0
    malformed: int = 0
    offered: int = 0
    selected: int = 0
    elapsed: float = 0.0  # seconds

    def summary(self) -> str:
        return (
            f"[{self.strategy}] k={self.k}: {self.records_decoded} records, "
            f"{self.malformed} malformed, {self.fragments_skipped} fragments skipped, "
            f"{self.selected} selected in {self.elapsed:.3f}s"
        )


@dataclass
class RunResult:
    candidates: list[Candidate]
    stats: RunStats

    def entries(self) -> list[str]:
        """Formatted fortune blocks, best first."""
        return [format_entry(c) for c in self.candidates]


def run(text: str, k: int = DEFAULT_K, strategy: str = DEFAULT_STRATEGY) -> RunResult:
    """Select the top ``k`` candidates from ``text`` with the given strategy."""
    logger = get_logger("run")
    selector = make_selector(strategy, k)
    stats = RunStats(strategy=strategy, k=k)
    decoder = RecordDecoder(text)

    start = time.perf_counter()
    for raw in decoder:
        stats.records_decoded += 1
        try:
            candidate = normalize(raw)
        except MalformedRecord as e:
            stats.malformed += 1
            logger.debug("Dropping record: %s", e)
            continue
        selector.offer(candidate)
        stats.offered += 1

    candidates = selector.finalize()
    stats.elapsed = time.perf_counter() - start
    stats.fragments_skipped = decoder.skipped
    stats.selected = len(candidates)
    logger.debug(stats.summary())
    return RunResult(candidates=candidates, stats=stats)


def benchmark(text: str, k: int = DEFAULT_K, strategies=None) -> list[RunResult]:
    """Run every strategy over the same text and log their timings."""
    results = []
    for name in strategies or list(STRATEGIES):
        result = run(text, k, name)
        get_logger("run").info(result.stats.summary())
        results.append(result)
    return results


def results_agree(results: list[RunResult]) -> bool:
    """True when every result selected the same ranked sequence."""
    if not results:
        return True
    expected = [rank_key(c) for c in results[0].candidates]
    return all([rank_key(c) for c in r.candidates] == expected for r in results[1:])
