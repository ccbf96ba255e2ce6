"""
Solver module for edge-forcing deduction and clue verification.

This module provides the single-line deduction, the fixed-point driver
that applies it over every row and column, and the run-length verifier.
"""
