"""Logging benchmarks (pytest-benchmark).

Run with::

    pytest tests/benchmarks/ --benchmark-sort=median

or as plain functional tests with ``--benchmark-disable``.
"""
