"""
Test suite for the flower shop package

Contains:
- tests/unit/          : Unit tests for individual modules
"""
