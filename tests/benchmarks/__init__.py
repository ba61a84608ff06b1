"""Optional micro-benchmarks (pytest-benchmark).

Not collected by default; run explicitly::

    pytest tests/benchmarks/ --benchmark-sort=median
    pytest tests/benchmarks/ --benchmark-disable   # as plain tests
"""
