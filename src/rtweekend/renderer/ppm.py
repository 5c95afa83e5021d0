# renderer/ppm.py
from typing import TextIO
import numpy as np

def write_ppm(stream: TextIO, image: np.ndarray) -> None:
    """
    Write a (height, width, 3) uint8 image as plain PPM (P3).
    Rows go top to bottom, one "r g b" line per pixel.
    """
    height, width = image.shape[:2]
    stream.write(f"P3\n{width} {height}\n255\n")
    for row in image:
        for r, g, b in row:
            stream.write(f"{int(r)} {int(g)} {int(b)}\n")
