"""
Test suite for graal

Contains:
- tests/unit/  : Unit tests for individual modules (ranges, contracts, domain, harness, logger)
"""
