"""Performance benchmarks for imflex.

Run with: pytest tests/benchmarks/ --benchmark-only
"""
