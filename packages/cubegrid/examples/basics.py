"""Terminal pulse -- the cube grid driven without a window.

Demonstrates:
- Building a driver from GridOptions
- Running a Clock in wall-clock time until the animation ends
- Reading tile fractions from the repaint trigger

Run: python -m examples.basics
"""

from cubegrid import Clock, CubeGridDriver, GridOptions

SHADES = " .:-=+*#%@"


class PrintCallback:
    def on_animation_start(self) -> None:
        print("=== start ===")

    def on_animation_end(self) -> None:
        print("=== end ===")


def main() -> None:
    clock = Clock()
    options = GridOptions(
        total_width=300,
        total_height=300,
        rows=3,
        columns=3,
        loop_count=1,
        callback=PrintCallback(),
    )
    ticks = 0

    def show() -> None:
        nonlocal ticks
        ticks += 1
        # Print every fifth tick.
        if ticks % 5 != 1:
            return
        rows = driver.fractions()
        cells = [" ".join(SHADES[int(f * (len(SHADES) - 1))] for f in row) for row in rows]
        print(f"  {driver.elapsed:5d}  |  " + "  |  ".join(cells))

    driver = CubeGridDriver(options, clock, repaint=show)
    driver.start()
    clock.run_forever()

    print(f"\nDone after {clock.now} ms, total {driver.total_duration} units.")


if __name__ == "__main__":
    main()
