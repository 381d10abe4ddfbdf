"""
Test suite for quadint-engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
