"""BaseService: common foundation for domblock services.

Every service receives the frozen :class:`DomSettings` at construction
time and reads its configuration sections from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from domblock.domain.errors import InputError
from domblock.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from domblock.config.settings import DomSettings


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class ClassifyService(BaseService):
            def check(self, stream: Iterable[str]) -> ServiceResult:
                policy = self._settings.normalize.empty_labels
                ...
    """

    def __init__(self, settings: DomSettings) -> None:
        self._settings = settings

    @staticmethod
    def _failure(op: str, exc: InputError) -> ServiceResult:
        """Convert a rejected-input exception into a failed ServiceResult."""
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=str(exc), detail=exc.detail),
        )
