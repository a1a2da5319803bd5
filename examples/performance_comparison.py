# examples/performance_comparison.py
"""
Example comparing every technique against its naive counterpart.
Shows how to configure and read a BenchmarkSuite run.
"""

from pyspeed import BenchmarkConfig, BenchmarkSuite, Comparison, Technique
from pyspeed.logging_config import setup_logging


def compare_techniques(sequence_size=200_000, backend="numpy"):
    """
    Run the timed techniques and print a speedup table.

    Args:
        sequence_size: Size of the sequences each technique processes
        backend: Array backend for the vectorized comparison
    """
    config = BenchmarkConfig(
        repeat=5,
        warmup=1,
        sequence_size=sequence_size,
        vector_backend=backend,
        verbose=True
    )
    suite = BenchmarkSuite(config)
    results = suite.run([
        Technique.COMPREHENSION,
        Technique.GENERATOR,
        Technique.VECTORIZED,
        Technique.MULTIPROCESSING,
        Technique.THREADING,
        Technique.SLOTS,
    ])

    print(f"\n{'Technique':<16} {'Baseline':>12} {'Optimized':>12} {'Speedup':>8}")
    print("-" * 52)
    for technique, result in results.items():
        if not isinstance(result, Comparison):
            continue
        print(f"{technique.value:<16} "
              f"{result.baseline.mean * 1000:>10.2f}ms "
              f"{result.candidate.mean * 1000:>10.2f}ms "
              f"{result.speedup:>7.2f}x")

    generator = results[Technique.GENERATOR]
    print(f"\nGenerator peak memory: {generator.extra['generator_peak_bytes'] / 1024:.1f} KB "
          f"vs list {generator.extra['list_peak_bytes'] / 1024**2:.1f} MB")

    slots = results[Technique.SLOTS]
    print(f"Slotted records save {slots.extra['saving']:.0%} of the plain footprint")


if __name__ == "__main__":
    setup_logging(verbose=True)
    compare_techniques()
