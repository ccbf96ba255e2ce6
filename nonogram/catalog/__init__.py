"""
Puzzle records and the built-in fixture puzzles.
"""
