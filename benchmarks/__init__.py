"""
Benchmark suite for jval parsing and serialization.

Compares jval against:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Run with ``pytest benchmarks --benchmark-only``.
"""
