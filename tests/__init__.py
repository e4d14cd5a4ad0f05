"""
Test suite for Bruchrechner

Contains:
- tests/unit/          : Unit tests for individual modules
"""
