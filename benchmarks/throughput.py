import time

from unlimited_timeout import MAX_TIMEOUT, MiniLoop, set_timeout


def bench_unlimited(iterations: int = 1000) -> float:
    """Run the workload through set_timeout with chunked delays."""
    loop = MiniLoop(virtual=True)
    count = 0

    def cb():
        nonlocal count
        count += 1
        if count < iterations:
            set_timeout(cb, MAX_TIMEOUT * 2 + 1, host=loop)

    set_timeout(cb, MAX_TIMEOUT * 2 + 1, host=loop)
    start = time.time()
    loop.run()
    return time.time() - start


def bench_native(iterations: int = 1000) -> float:
    """Run the same number of host timers directly on the loop."""
    loop = MiniLoop(virtual=True)
    count = 0

    def cb():
        nonlocal count
        count += 1
        if count < iterations * 3:
            loop.call_later(MAX_TIMEOUT, cb)

    loop.call_later(MAX_TIMEOUT, cb)
    start = time.time()
    loop.run()
    return time.time() - start


def bench(iterations: int = 1000) -> tuple[float, float]:
    """Return runtimes for (set_timeout, loop.call_later)."""
    return bench_unlimited(iterations), bench_native(iterations)


if __name__ == "__main__":
    utime, ntime = bench()
    print(f"set_timeout: {utime:.6f}")
    print(f"call_later: {ntime:.6f}")
