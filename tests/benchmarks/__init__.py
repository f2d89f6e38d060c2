"""Masking and logger micro-benchmarks (pytest-benchmark).

Not part of the default ``testpaths``; select them explicitly::

    pytest tests/benchmarks/ --benchmark-sort=mean
    pytest tests/benchmarks/ --benchmark-disable   # correctness only
"""
