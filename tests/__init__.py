"""
Test suite for cider-chem

Contains:
- tests/unit/          : Unit tests for quantities, regressions and the chaptalization solver
"""
