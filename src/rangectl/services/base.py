"""BaseService — shared foundation for rangectl services.

Every service receives the resolved :class:`RangeSettings` at
construction time and converts domain errors into failed results.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from rangectl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from rangectl.config.settings import RangeSettings
    from rangectl.domain.errors import DateRangeError

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service classes.

    Usage::

        class RuleService(BaseService):
            def invert_rule(self, token: str) -> ServiceResult:
                try:
                    ...
                except DateRangeError as exc:
                    return self._failure("invert_rule", exc)
    """

    def __init__(self, settings: RangeSettings) -> None:
        self._settings = settings

    @staticmethod
    def _failure(op: str, exc: DateRangeError, **detail: Any) -> ServiceResult:
        """Wrap a domain error as a failed ServiceResult."""
        logger.debug("%s failed: %s", op, exc)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=str(exc), detail=detail),
        )
