"""
Test suite for ringdecode

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/builders.py    : Test-only buffer encoder
"""
