"""Input error taxonomy.

Every input error is fatal to the batch. The service layer converts
them into ``ServiceError`` payloads using ``code`` and ``detail``.
"""

from __future__ import annotations

from typing import Any, ClassVar


class InputError(ValueError):
    """Base class for rejected input."""

    code: ClassVar[str] = "INPUT_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.detail: dict[str, Any] = detail


class MalformedCountError(InputError):
    """A count line is not a non-negative integer."""

    code = "MALFORMED_COUNT"


class ShortInputError(InputError):
    """The stream ended before the declared number of lines."""

    code = "SHORT_INPUT"


class EmptyLabelError(InputError):
    """A domain contains an empty label under the ``reject`` policy."""

    code = "EMPTY_LABEL"


class BlocklistNotFoundError(InputError):
    code = "BLOCKLIST_NOT_FOUND"


class InvalidEncodingError(InputError):
    """Input bytes are not valid UTF-8."""

    code = "INVALID_ENCODING"


class IndexFrozenError(RuntimeError):
    """Raised when inserting into an index that is already queryable."""
