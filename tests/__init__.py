"""
Test suite for semigroup_lab

Contains:
- tests/unit/          : Unit tests for individual modules
"""
