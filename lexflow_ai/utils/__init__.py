"""Framework-agnostic helpers shared across the package."""
