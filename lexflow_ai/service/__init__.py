"""Service layer: orchestrator facade, setup guide and CLI."""

from .orchestrator import AIOrchestrator
from .setup_guide import setup_instructions

__all__ = ["AIOrchestrator", "setup_instructions"]
