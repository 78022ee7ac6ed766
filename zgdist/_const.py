"""
Constants declarations for zgdist
"""

import math

# For converting degrees to radians
DEGREE = math.pi / 180.0

# WGS84 Ellipsoid Constants
WGS84_A = 6378.137  # Semi-major axis (kilometers)
WGS84_B = 6356.752314245  # Semi-minor axis (kilometers)
