"""
Test suite for bens_number_theory

Contains:
- tests/unit/          : Unit tests for individual modules
"""
