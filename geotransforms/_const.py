"""
Constants declarations for geotransforms
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening

# GRS80 Ellipsoid Constants
GRS80_A = 6378137.0
GRS80_F = 1 / 298.257222101

# WGS72 Ellipsoid Constants
WGS72_A = 6378135.0
WGS72_F = 1 / 298.26
