# -*- coding: utf-8 -*-
"""
Provides image export of the RGBA pixel buffer using Pillow.
"""

__all__ = ["save_image", "load_image"]

import numpy as np
from PIL import Image

def save_image(pixels, filename):
    """
    Encode the (height, width, 4) RGBA buffer to filename. The format
    follows the file extension; formats without alpha get RGB.
    """
    height, width, dim = pixels.shape
    pixels = np.ascontiguousarray(pixels).reshape((height * width * dim,))

    img = Image.frombuffer("RGBA", (width, height), pixels, "raw", "RGBA", 0, 1)
    try:
        img.save(filename)
    except OSError:
        # e.g. JPEG cannot write mode RGBA
        img.convert("RGB").save(filename)

    print(f"image saved as {filename}")


def load_image(filename):
    """
    Decode filename into a (height, width, 4) RGBA uint8 array.
    """
    with Image.open(filename) as img:
        return np.asarray(img.convert("RGBA"), dtype=np.uint8).copy()
