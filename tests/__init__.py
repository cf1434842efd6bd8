"""
Test suite for polysolve

Contains:
- tests/unit/          : Unit tests for individual modules
"""
