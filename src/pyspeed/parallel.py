# src/pyspeed/parallel.py
"""
Process pools for CPU-bound work and threads for I/O-bound work.
"""

import logging
import multiprocessing
import threading
import time
from typing import Any, Callable, Iterable, List, Optional, Sequence

from .exceptions import ThreadTaskError


logger = logging.getLogger(__name__)


def busy_sum(n: int) -> int:
    """Pure-Python CPU-bound loop; holds the GIL for its whole run."""
    total = 0
    for i in range(n):
        total += (i * i) % 97
    return total


def process_map(func: Callable, iterable: Iterable, workers: int = 4,
                chunksize: Optional[int] = None) -> List[Any]:
    """
    Map ``func`` over ``iterable`` with a fixed-size pool of worker processes.

    ``func`` must be picklable (defined at module level). Results keep input
    order. An exception raised in a worker is re-raised here.
    """
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")

    items = list(iterable)
    logger.info(f"Mapping {getattr(func, '__name__', func)!s} over {len(items)} items with {workers} processes")
    with multiprocessing.Pool(processes=workers) as pool:
        try:
            return pool.map(func, items, chunksize)
        finally:
            pool.close()
            pool.join()


def announce_url(url: str) -> str:
    """Default thread target: report the URL, perform no network I/O."""
    print(f"Fetching {url}")
    logger.debug(f"{threading.current_thread().name} handled {url}")
    return url


def simulated_io(delay: float) -> Callable[[Any], Any]:
    """Build a target that blocks for ``delay`` seconds, then echoes its argument."""
    def _wait(item):
        time.sleep(delay)
        return item
    return _wait


def run_threads(items: Sequence[Any], target: Callable[[Any], Any] = announce_url,
                thread_count: int = 10) -> List[Any]:
    """
    Run ``target`` over ``items`` on at most ``thread_count`` threads.

    Every thread is joined before returning. Results are returned in input
    order; if any call raised, ThreadTaskError lists each failing index.
    """
    if thread_count < 1:
        raise ValueError(f"thread_count must be at least 1, got {thread_count}")

    items = list(items)
    results = [None] * len(items)
    failures = []
    lock = threading.Lock()
    next_index = [0]

    def worker():
        while True:
            with lock:
                index = next_index[0]
                if index >= len(items):
                    return
                next_index[0] += 1
            try:
                results[index] = target(items[index])
            except Exception as exc:
                with lock:
                    failures.append((index, exc))

    threads = []
    for i in range(min(thread_count, len(items))):
        t = threading.Thread(target=worker, name=f"pyspeed-worker-{i}")
        threads.append(t)
        t.start()

    for t in threads:
        t.join()

    if failures:
        failures.sort(key=lambda failure: failure[0])
        raise ThreadTaskError(failures)
    return results
