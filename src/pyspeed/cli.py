# src/pyspeed/cli.py
"""
Command-line interface for the pyspeed package
"""

import argparse
import sys

from .benchmark import BenchmarkSuite, Comparison
from .config import BenchmarkConfig
from .enums import Technique, WorkloadKind
from .guide import validate_guide
from .logging_config import setup_logging
from .profiler import ProfileReport
from .runtime import RuntimeManager
from . import __version__


def format_bytes(bytes_value):
    """Format bytes to human-readable string."""
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if bytes_value < 1024.0:
            return f"{bytes_value:.2f} {unit}"
        bytes_value /= 1024.0
    return f"{bytes_value:.2f} PB"


def non_negative_int(value):
    """argparse type for sizes: an integer >= 0."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def print_system_info(manager):
    """Print interpreter, CPU, memory and device information."""
    info = manager.info()
    print(f"pyspeed v{__version__} - System Information")
    print("=" * 50)

    print("\nInterpreter:")
    print(f"  Implementation: {info.implementation} {info.version}")
    print(f"  JIT compiled: {'yes' if info.is_jit else 'no'}")

    print("\nCPU Information:")
    print(f"  Physical cores: {info.physical_cores}")
    print(f"  Logical cores: {info.logical_cores}")

    print("\nSystem Memory:")
    print(f"  Total: {format_bytes(info.total_memory)}")
    print(f"  Available: {format_bytes(info.available_memory)}")

    gpus = [d for d in info.devices if d.device_type == 'cuda']
    if gpus:
        print("\nGPU Information:")
        for device in gpus:
            print(f"  GPU {device.device_id}: {device.device_name}")
            print(f"    Total memory: {format_bytes(device.total_memory)}")
            print(f"    Free memory: {format_bytes(device.available_memory)}")
        print(f"\n  Total GPU memory: {format_bytes(manager.get_total_gpu_memory())}")
    else:
        print("\n  No CUDA GPUs detected - vectorized work runs on CPU")


def print_recommendations(manager, workload):
    """Print the techniques to try first for a workload."""
    print("\n" + "=" * 50)
    print(f"Recommendations for {workload.value}-bound work:")
    for position, technique in enumerate(manager.recommend(workload), start=1):
        print(f"  {position}. {technique.value}")
    if workload == WorkloadKind.CPU_BOUND and not manager.is_jit:
        print("\n  Pure-Python hot loops may run several times faster under PyPy:")
        print("    pypy3 your_script.py")


def print_benchmarks(results):
    """Print a result table of a BenchmarkSuite run."""
    print("\n" + "=" * 50)
    print("Benchmark results:")
    for technique, result in results.items():
        if isinstance(result, Comparison):
            print(f"\n  {technique.value}:")
            print(f"    {result.baseline.name:<16} {result.baseline.mean * 1000:9.3f} ms")
            print(f"    {result.candidate.name:<16} {result.candidate.mean * 1000:9.3f} ms")
            print(f"    Speedup: {result.speedup:.2f}x")
            for key, value in result.extra.items():
                print(f"    {key}: {value}")
        elif isinstance(result, ProfileReport):
            print(f"\n  {technique.value}: {result.total_calls} calls in {result.wall_time:.4f}s")
            for row in result.top[:5]:
                print(f"    {row.cumulative_time:8.4f}s  {row.calls:>8}  {row.function}")
        else:
            print(f"\n  {technique.value}: {result}")


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="pyspeed: measure the classic Python performance techniques",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pyspeed-info                              # Show system information
  pyspeed-info --workload io                # Techniques for I/O-bound work
  pyspeed-info --benchmark comprehension    # Loop vs comprehension timings
  pyspeed-info --check-guide README.md      # Validate the guide's snippets
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'pyspeed v{__version__}'
    )

    parser.add_argument(
        '--workload',
        choices=[w.value for w in WorkloadKind],
        default=WorkloadKind.CPU_BOUND.value,
        help='Kind of work to recommend techniques for'
    )

    parser.add_argument(
        '--benchmark',
        nargs='*',
        choices=[t.value for t in Technique],
        metavar='TECHNIQUE',
        help='Benchmark the given techniques (all when none are named)'
    )

    parser.add_argument(
        '--size',
        type=non_negative_int,
        default=BenchmarkConfig.sequence_size,
        metavar='N',
        help='Sequence size used by the benchmarks'
    )

    parser.add_argument(
        '--check-guide',
        metavar='PATH',
        help='Check that every Python code block of a Markdown guide compiles'
    )

    parser.add_argument(
        '--run-snippets',
        action='store_true',
        help='With --check-guide, also execute each snippet'
    )

    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose logging')

    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose)

    if args.check_guide:
        try:
            report = validate_guide(args.check_guide, run=args.run_snippets)
        except OSError as exc:
            print(f"✗ Cannot read guide: {exc}")
            return 1
        print(f"Checked {report.checked} snippets ({report.skipped} non-Python skipped)")
        for failure in report.failures:
            print(f"  ✗ {failure}")
        if report.ok:
            print("✓ All snippets passed")
        return 0 if report.ok else 1

    manager = RuntimeManager()
    print_system_info(manager)
    print_recommendations(manager, WorkloadKind(args.workload))

    if args.benchmark is not None:
        config = BenchmarkConfig(sequence_size=args.size, verbose=args.verbose)
        techniques = [Technique(name) for name in args.benchmark] or None
        print_benchmarks(BenchmarkSuite(config).run(techniques))

    return 0


if __name__ == "__main__":
    sys.exit(main())
