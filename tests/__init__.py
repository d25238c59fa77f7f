"""
Test suite for tiempo

Contains:
- tests/unit/          : Unit tests for individual modules
"""
