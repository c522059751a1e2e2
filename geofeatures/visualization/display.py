"""
On-screen display through cv2 HighGUI windows.
"""

import cv2
import numpy as np
from typing import Dict


def show_images(windows: Dict[str, np.ndarray], wait: bool = True):
    """
    Opens one window per entry (title -> image) and, if wait is set,
    blocks until a key is pressed.
    """
    for title, image in windows.items():
        cv2.imshow(title, image)
    if wait:
        cv2.waitKey(0)
