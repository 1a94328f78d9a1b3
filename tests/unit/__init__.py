"""
Unit tests for thread detection.

Test individual components in isolation:
- Signal catalog (header, repetition, separator and keyword patterns)
- Classifier (every confidence branch, invariants, split default)
- Data models (invariant enforcement, immutability, serialization)
- Settings, logging and API error handlers
"""
