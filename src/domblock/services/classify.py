"""ClassifyService: block-list verdicts for query domains.

Three surfaces over the same engine:
- check: the batch stream protocol (counts + domain lines)
- classify: two in-memory lists of raw domains
- lookup: a block-list file plus query domains

Each builds a :class:`SuffixIndex` from the normalized block-list,
freezes it, then answers every query in input order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from domblock.domain.errors import InputError
from domblock.domain.index import SuffixIndex
from domblock.domain.names import normalize
from domblock.infrastructure.batch_io import load_blocklist, read_batch
from domblock.services.base import BaseService
from domblock.services.result import ServiceResult
from domblock.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class ClassifyService(BaseService):
    """Builds the suffix index and classifies query domains."""

    @traced
    def check(self, stream: Iterable[str]) -> ServiceResult:
        """Run the batch protocol over the decoded lines of *stream*."""
        try:
            with trace_span("read_batch") as span:
                batch = read_batch(stream)
                if span:
                    span.annotate("blocked", len(batch.blocked))
                    span.annotate("queries", len(batch.queries))
            data = self._classify(batch.blocked, batch.queries)
        except InputError as exc:
            logger.debug("Batch rejected: %s", exc)
            return self._failure("check", exc)
        return ServiceResult(ok=True, op="check", data=data)

    @traced
    def classify(self, blocked: Sequence[str], queries: Sequence[str]) -> ServiceResult:
        """Classify *queries* against the raw *blocked* domains."""
        try:
            data = self._classify(blocked, queries)
        except InputError as exc:
            return self._failure("classify", exc)
        return ServiceResult(ok=True, op="classify", data=data)

    @traced
    def lookup(self, blocklist: Path, domains: Sequence[str]) -> ServiceResult:
        """Classify *domains* against the entries of a block-list file."""
        try:
            with trace_span("load_blocklist"):
                entries = load_blocklist(
                    blocklist,
                    comment_prefix=self._settings.blocklist.comment_prefix,
                )
            data = self._classify(entries, domains)
        except InputError as exc:
            return self._failure("lookup", exc)
        data["blocklist"] = str(blocklist)
        warnings = [] if entries else [f"Block-list {blocklist} has no entries"]
        return ServiceResult(ok=True, op="lookup", data=data, warnings=warnings)

    # ------------------------------------------------------------------
    # shared engine
    # ------------------------------------------------------------------

    def _classify(self, blocked: Sequence[str], queries: Sequence[str]) -> dict[str, object]:
        policy = self._settings.normalize.empty_labels

        with trace_span("build_index") as span:
            index = SuffixIndex.build(normalize(raw, empty_labels=policy) for raw in blocked)
            if span:
                span.annotate("keys", len(index))
        duplicates = len(blocked) - len(index)
        logger.debug("Index built: %d entries, %d duplicates", len(index), duplicates)

        verdicts: list[dict[str, object]] = []
        with trace_span("query"):
            for raw in queries:
                match = index.find_blocking(normalize(raw, empty_labels=policy))
                verdicts.append(
                    {
                        "domain": raw,
                        "blocked": match is not None,
                        "matched": str(match) if match is not None else None,
                    }
                )

        blocked_total = sum(1 for v in verdicts if v["blocked"])
        logger.debug("Classified %d queries, %d blocked", len(verdicts), blocked_total)
        return {
            "verdicts": verdicts,
            "entries": len(index),
            "duplicates": duplicates,
            "queries": len(verdicts),
            "blocked": blocked_total,
        }
