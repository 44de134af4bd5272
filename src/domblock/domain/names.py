"""Domain name normalization.

A normalized domain stores its labels top-level first, so
``math.gdz.ru`` becomes ``("ru", "gdz", "math")``. In that order the
ancestor-or-self relation is a plain tuple prefix test.

INVARIANT: A NormalizedDomain is never modified after construction.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from domblock.domain.errors import EmptyLabelError

LABEL_SEPARATOR = "."


class EmptyLabelPolicy(StrEnum):
    """What to do with empty labels (``a..b``, ``.a``, ``a.``, ``""``)."""

    REJECT = "reject"
    LITERAL = "literal"


@dataclass(frozen=True, order=True)
class NormalizedDomain:
    """Domain labels ordered from top-level to most specific.

    Equality and ordering compare the label tuples lexicographically.
    """

    labels: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.labels:
            msg = "A domain needs at least one label"
            raise ValueError(msg)
        for label in self.labels:
            if LABEL_SEPARATOR in label:
                msg = f"Label {label!r} must not contain {LABEL_SEPARATOR!r}"
                raise ValueError(msg)

    @property
    def key(self) -> str:
        """Labels joined top-level first (``a.b.c`` -> ``c.b.a``)."""
        return LABEL_SEPARATOR.join(self.labels)

    @property
    def depth(self) -> int:
        return len(self.labels)

    def ancestors(self) -> Iterator[NormalizedDomain]:
        """Yield every ancestor-or-self, shallowest first."""
        for end in range(1, len(self.labels) + 1):
            yield NormalizedDomain(self.labels[:end])

    def is_ancestor_of(self, other: NormalizedDomain) -> bool:
        """True if *other* equals this domain or is a subdomain of it."""
        return other.labels[: len(self.labels)] == self.labels

    def __str__(self) -> str:
        return LABEL_SEPARATOR.join(reversed(self.labels))


def normalize(
    raw: str,
    *,
    empty_labels: EmptyLabelPolicy = EmptyLabelPolicy.REJECT,
) -> NormalizedDomain:
    """Split *raw* on dots and reverse the labels.

    Case and characters are kept as given. Empty labels are rejected
    with :class:`EmptyLabelError` unless *empty_labels* is ``LITERAL``.

    Examples:
        >>> normalize("math.gdz.ru").labels
        ('ru', 'gdz', 'math')
        >>> normalize("a.b.c").key
        'c.b.a'
    """
    labels = raw.split(LABEL_SEPARATOR)
    if empty_labels is EmptyLabelPolicy.REJECT and "" in labels:
        msg = f"Domain {raw!r} contains an empty label"
        raise EmptyLabelError(msg, domain=raw)
    labels.reverse()
    return NormalizedDomain(tuple(labels))
