"""Nesting limit for the recursive passes over a message tree.

The whitespace normalizer and the interpreter both recurse once per
select/plural/selectordinal level. A DepthGuard counts those levels and
raises DepthLimitExceededError, a MessageError, instead of letting a
deeply nested (usually programmatically built) tree hit RecursionError.

Thread-safe: each pass owns its guard; no shared state.
Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from icumessage.constants import MAX_DEPTH
from icumessage.diagnostics import DepthLimitExceededError, ErrorTemplate

__all__ = ["DepthGuard"]


@dataclass(slots=True)
class DepthGuard:
    """Context manager counting nesting levels.

    Usage:
        guard = DepthGuard()
        with guard:
            self._interpret_complex(node, options)

    Attributes:
        max_depth: Deepest allowed level (default: MAX_DEPTH)
        current_depth: Levels currently entered
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)

    def __enter__(self) -> DepthGuard:
        """Enter one level; raise if that goes past max_depth."""
        if self.current_depth >= self.max_depth:
            raise DepthLimitExceededError(ErrorTemplate.depth_exceeded(self.max_depth))
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Leave one level."""
        self.current_depth -= 1
