"""Build the eight-swatch palette for a seed color and save it as a PNG.

Run with:
    python examples/palette_demo.py [output.png]

Needs the ``examples`` extra (Pillow).
"""
import sys

import numpy as np
from PIL import Image

from chromix import Color, build_palette, PALETTE_ORDER


def main(path: str = "palette.png") -> None:
    seed = Color.from_rgba(1.0, 0.0, 0.004, 1.0)
    print("Seed:", seed.hex_string().upper())

    palette = build_palette(seed)
    for name, hex_string in zip(PALETTE_ORDER, palette.hex_strings(uppercase=True)):
        print(f"  {name:<30} {hex_string}")

    strip = palette.to_strip(swatch_size=60)
    image = Image.fromarray(np.round(strip * 255).astype(np.uint8))
    image.save(path)
    print(f"Saved {image.size[0]}x{image.size[1]} strip to {path}")


if __name__ == "__main__":
    main(*sys.argv[1:2])
