"""Performance benchmarks for ftl-datetime.

Benchmarks use pytest-benchmark to compare formatter construction against
cached formatting through the memoizers.

Python 3.13+.
"""
