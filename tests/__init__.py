"""
Test suite for argsort-geometry

Contains:
- tests/unit/          : Unit tests for individual modules
"""
