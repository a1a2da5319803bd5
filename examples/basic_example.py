# examples/basic_example.py
"""
Basic example: every technique of the guide, called through pyspeed
"""

import pyspeed
from pyspeed import Technique, WorkloadKind


def show_profile():
    """Profile a loop and print the most expensive functions."""
    print("\n1. Profiling")
    report = pyspeed.profile_call(pyspeed.squares_loop, 200_000, limit=5)
    print(f"   {report.total_calls} calls in {report.wall_time:.4f}s")
    for row in report.top:
        print(f"   {row.cumulative_time:8.4f}s  {row.function}")


def show_comprehension():
    print("\n2. Comprehensions")
    loop = pyspeed.squares_loop(10)
    comprehension = pyspeed.squares_comprehension(10)
    print(f"   loop:          {loop}")
    print(f"   comprehension: {comprehension}")
    print(f"   identical: {loop == comprehension}")


def show_generator():
    print("\n3. Generators")
    _, eager_peak = pyspeed.peak_allocation(pyspeed.sum_of_squares, 1_000_000, lazy=False)
    _, lazy_peak = pyspeed.peak_allocation(pyspeed.sum_of_squares, 1_000_000, lazy=True)
    print(f"   list peak:      {eager_peak / 1024**2:.2f} MB")
    print(f"   generator peak: {lazy_peak / 1024:.2f} KB")


def show_vectorized():
    print("\n4. Vectorized computation")
    squares = pyspeed.squares_vectorized(1_000_000)
    print(f"   first squares: {squares[:5]}, total: {squares.sum()}")


def show_processes():
    print("\n5. Process pool")
    print(f"   {pyspeed.process_map(pyspeed.square, range(10), workers=4)}")


def show_threads():
    print("\n6. Threads")
    urls = [f"https://example.com/page/{i}" for i in range(10)]
    pyspeed.run_threads(urls, thread_count=10)


def show_slots():
    print("\n7. __slots__")
    comparison = pyspeed.compare_footprint(100_000)
    print(f"   plain:   {comparison.plain_bytes / 1024**2:.2f} MB")
    print(f"   slotted: {comparison.slotted_bytes / 1024**2:.2f} MB ({comparison.saving:.0%} saved)")


def show_release():
    print("\n8. Explicit release")
    report = pyspeed.release_sequence(1_000_000)
    print(f"   allocated {report.allocated_bytes / 1024**2:.2f} MB, "
          f"released {report.released_bytes / 1024**2:.2f} MB")


def show_runtime():
    print("\n9. Interpreter")
    manager = pyspeed.RuntimeManager()
    print(f"   {manager.implementation} {manager.version} (JIT: {manager.is_jit})")
    techniques = manager.recommend(WorkloadKind.CPU_BOUND)
    if Technique.JIT in techniques:
        print("   CPU-bound code may run faster under PyPy: pypy3 your_script.py")


if __name__ == "__main__":
    print("pyspeed basic example")
    print("=" * 50)
    show_profile()
    show_comprehension()
    show_generator()
    show_vectorized()
    show_processes()
    show_threads()
    show_slots()
    show_release()
    show_runtime()
