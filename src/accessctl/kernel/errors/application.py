"""Application-layer errors – outcomes of role resolution use-cases."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from accessctl.kernel.errors.base import BaseError

if TYPE_CHECKING:
    from accessctl.kernel.security.role import Role


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class PartialResolutionError(ApplicationError):
    """A batch resolution finished, but some identities could not be resolved.

    ``resolved`` holds the roles of every identity that succeeded and
    ``failures`` maps each failed identity id to the exception it raised.
    """

    default_code = "partial_resolution"

    def __init__(
        self,
        resolved: Mapping[str, Sequence["Role"]],
        failures: Mapping[str, BaseException],
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Role resolution failed for {len(failures)} of "
            f"{len(failures) + len(resolved)} identities",
            detail={"failed_ids": sorted(failures)},
            **kwargs,
        )
        self.resolved: dict[str, list[Role]] = {k: list(v) for k, v in resolved.items()}
        self.failures: dict[str, BaseException] = dict(failures)


__all__ = ["ApplicationError", "PartialResolutionError"]
