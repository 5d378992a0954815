import sys

from benchmarks.throughput import bench


def report(iterations: int) -> float:
    """Print both runtimes and return the chunking overhead factor."""
    unlimited, native = bench(iterations)
    overhead = unlimited / native if native else float("inf")
    print(f"{iterations} timers, 3 host chunks each")
    print(f"  set_timeout: {unlimited:.6f}s")
    print(f"  call_later:  {native:.6f}s")
    print(f"  overhead:    {overhead:.2f}x")
    return overhead


if __name__ == "__main__":
    report(int(sys.argv[1]) if len(sys.argv) > 1 else 1000)
