"""
Hue arithmetic on the 360 degree color wheel.
"""


def wrap_hue(hue: float) -> float:
    """Wrap a hue in degrees into [0, 360)."""
    wrapped = hue % 360.0
    # -1e-18 % 360.0 rounds to 360.0
    if wrapped >= 360.0:
        wrapped = 0.0
    return wrapped


def hue_distance(h1: float, h2: float) -> float:
    """
    Circular distance between two hues, in [0, 180].
    
    Inputs are expected in [0, 360); the result is the shorter way around
    the wheel.
    """
    d = abs(h1 - h2)
    return 360.0 - d if d > 180.0 else d
