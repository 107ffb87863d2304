"""DTO validation package for orchestration requests."""

from .invocation_request import InvocationRequest, TaskKind

__all__ = ["InvocationRequest", "TaskKind"]
