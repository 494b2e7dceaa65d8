"""Drift correction in action -- a plain repeating sleep against a DriftTimer.

Demonstrates:
- Starting a timer with set_timer() on the running asyncio loop
- Reading the drift passed to every tick
- Comparing against naive re-arming, which accumulates lateness
- Stopping with clear_timer()

Run: python -m examples.basics
"""

import asyncio
import logging
import time

from tick_drift import clear_timer, set_timer

INTERVAL = 50
TICKS = 20


async def naive() -> float:
    """Re-arm a fixed sleep after every tick; lateness piles up."""
    start = time.monotonic()
    for _ in range(TICKS):
        await asyncio.sleep(INTERVAL / 1000)
        time.sleep(0.003)  # pretend the tick does some work
    return (time.monotonic() - start) * 1000


async def corrected() -> float:
    done = asyncio.Event()
    start = time.monotonic()
    prev = start

    def on_tick(drift: float) -> None:
        nonlocal prev
        now = time.monotonic()
        print(f"  gap={(now - prev) * 1000:6.2f}ms  drift={drift:+6.2f}ms")
        prev = now
        time.sleep(0.003)
        if timer.tick_count + 1 >= TICKS:
            clear_timer(timer)
            done.set()

    timer = set_timer(on_tick, INTERVAL)
    await done.wait()
    return (time.monotonic() - start) * 1000


async def main() -> None:
    print(f"=== {TICKS} ticks at {INTERVAL}ms (ideal {TICKS * INTERVAL}ms) ===\n")

    total = await naive()
    print(f"naive sleep loop: {total:.1f}ms\n")

    print("drift timer:")
    total = await corrected()
    print(f"\ndrift timer: {total:.1f}ms")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
