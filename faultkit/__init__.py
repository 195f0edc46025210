"""Structured error descriptions: severities, categories, contexts and proposed fixes."""

__version__ = "0.1.1"
__all__ = ["kinds", "fixes", "context", "correction"]