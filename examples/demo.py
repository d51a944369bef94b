"""Demo script: draw one of every shape and save the figure."""

import logging
import math
from pathlib import Path

from shapekit import (
    DrawStyle,
    MplCanvas,
    box,
    cropmarks,
    ngon,
    ngonside,
    polycross,
    rounded_box,
    star,
)

OUTPUT = Path(__file__).resolve().parent / "shapes.pdf"


def main():
    logging.basicConfig(level=logging.INFO)
    canvas = MplCanvas(
        style=DrawStyle(fill_colour="steelblue", stroke_colour="black"),
        figsize=(6, 6),
    )

    # Row of regular polygons, then a row of stars.
    for i, sides in enumerate(range(3, 8)):
        ngon(canvas, (i * 60, 0), 25, sides, 0.0, "fillstroke")
    ngonside(canvas, (300, 0), 20, 8, math.pi / 8, "stroke")
    for i, npoints in enumerate(range(3, 8)):
        star(canvas, (i * 60, 70), 25, npoints, 0.4, 0.0, "fill")

    # Crosses with increasing splay.
    for i, splay in enumerate([0.0, 0.25, 0.5, 0.75, 1.0]):
        polycross(canvas, (i * 60, 140), 25, 4, 0.4, action="fillstroke", splay=splay)

    # Boxes.
    box(canvas, (0, 210), 50, 30, "stroke")
    rounded_box(canvas, (70, 210), 50, 30, [0, 5, 10, 15], "fill")
    rounded_box(canvas, (140, 210), 50, 30, 10)

    with canvas.saved_state():
        canvas.set_dash("dashed")
        box(canvas, (150, 105), 380, 300, "stroke")
    cropmarks(canvas, (150, 105), 380, 300)

    canvas.savefig(OUTPUT)
    logging.getLogger(__name__).info("Rendered %d patches to %s", len(canvas.patches), OUTPUT)


if __name__ == "__main__":
    main()
