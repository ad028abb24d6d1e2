"""
Shared utilities for FOLIO.

Common functionality used across contexts:
- Logger setup
- Settings loading
- Text report formatting
"""
