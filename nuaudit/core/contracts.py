"""
Contracts — Type definitions and interfaces for pipeline components.
"""

from typing import Protocol

from nuaudit.core.context import AuditContext


class Pass(Protocol):
    """Protocol for pipeline passes."""

    __name__: str

    def __call__(self, ctx: AuditContext) -> AuditContext:
        """Apply the pass to the context."""
        ...
