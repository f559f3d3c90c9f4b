"""jlo throughput benchmarks (pytest-benchmark).

Not collected by the default ``pytest`` run; name the file explicitly::

    pytest tests/benchmarks/bench_logging.py --benchmark-sort=mean
    pytest tests/benchmarks/bench_logging.py --benchmark-json=jlo-bench.json

Loggers write to a ``NullSink``, so the numbers cover gating,
interpolation, record assembly and encoding but no I/O.
"""
