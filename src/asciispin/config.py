"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Single source: grid size, the density gradient and all animation timing
   values live here instead of being scattered through the pipeline.
2. Overrides: the command line reads its defaults from here, so a run can
   change them without touching the pipeline modules.

Exports:
    WIDTH, HEIGHT (int): Default character grid dimensions.
    ASCII_CHARS (str): Density gradient, densest first.
    ROTATION_SPEED (float): Fixed per-tick increment in radians.
    TIME_NORMALIZATION (float): Elapsed-seconds scale of the variable policy.
"""

# --- Character grid ---
WIDTH: int = 120
HEIGHT: int = 40

# Densest first; the last entry is already visually empty.
ASCII_CHARS: str = "@%#MW&8B$*o!;:. "
BLANK: str = " "
# Samples brighter than this are background, regardless of the gradient.
BLANK_THRESHOLD: int = 240

# --- Animation ---
ROTATION_SPEED: float = 0.1        # rad per tick, fixed-timestep policy
TIME_NORMALIZATION: float = 60.0   # elapsed seconds -> 60 Hz frames
DEFAULT_SPEED: float = 0.05
SPEED_MIN: float = 0.01
SPEED_MAX: float = 0.5
SPEED_STEP: float = 0.01

FRAME_INTERVAL: float = 0.1        # seconds, terminal poll loop
GUI_FRAME_INTERVAL_MS: int = 16

# --- Window ---
VISIBLE_APP_NAME: str = "ASCII 3D Rotation"
WINDOW_SIZE: tuple[int, int] = (1200, 600)
IMAGE_FILTER: str = "Images (*.png *.jpg *.jpeg *.bmp *.gif *.tif *.tiff *.webp);;All Files (*)"
