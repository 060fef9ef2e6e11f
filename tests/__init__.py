"""
Test suite for tokenledger

Contains:
- tests/unit/          : Unit tests for individual modules
"""
