"""
Puzzle data model, line extraction and text IO adapters.
"""
