"""
Benchmark suite for jcheck validation performance.

Times jcheck against full parsers used as validity checks:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Also checks that validation memory grows with nesting depth only.
"""
