"""Deterministic simulation of a late host on a virtual clock.

Demonstrates:
- ManualHost as a stand-in for a real event loop
- fire_next(at=...) to make a tick fire late
- The next wait shrinking to pull the schedule back in line
- resync_after dropping missed ticks after a long stall

Run: python -m examples.simulation
"""

from tick_drift import DriftTimer, ManualHost


def run(label: str, resync_after: float | None) -> None:
    host = ManualHost()

    def on_tick(drift: float) -> None:
        print(f"  t={host.now():6.1f}  tick={timer.tick_count + 1:2d}  drift={drift:+6.1f}")

    timer = DriftTimer(on_tick, 50, host, resync_after=resync_after).start()

    print(f"--- {label} ---")
    host.fire_next()
    host.fire_next(at=112)  # 12ms late
    host.fire_next()
    host.fire_next(at=420)  # long stall
    host.advance(200)
    timer.stop()
    print()


def main() -> None:
    run("unbounded catch-up", resync_after=None)
    run("resync after 100ms", resync_after=100)


if __name__ == "__main__":
    main()
