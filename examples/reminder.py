from unlimited_timeout import MiniLoop, clear_interval, set_interval, set_timeout

DAY = 24 * 60 * 60 * 1000


def report(loop, label):
    print(f"day {loop.time() / DAY:5.1f}: {label}")


if __name__ == "__main__":
    # Virtual clock: ninety days pass instantly.
    loop = MiniLoop(virtual=True)
    set_timeout(report, 60 * DAY, loop, "renew the certificate", host=loop)
    weekly = set_interval(report, 7 * DAY, loop, "weekly backup", host=loop)
    set_timeout(clear_interval, 90 * DAY, weekly, host=loop)
    loop.run()
