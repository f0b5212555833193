"""
Constants declarations for georadar
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening
WGS84_B = (1 - WGS84_F) * WGS84_A
WGS84_E2 = (WGS84_A ** 2 - WGS84_B ** 2) / WGS84_A ** 2  # Eccentricity squared

# Mean Earth Radius (IUGG R1)
EARTH_MEAN_RADIUS = 6_371_008.8

# Geodesic solvers
VINCENTY_TOLERANCE = 1e-12
VINCENTY_MAX_ITERATIONS = 100
ECEF_ITERATIONS = 5

# Magnitude below which a vector is treated as zero
EPSILON = 1e-10

# Standard refraction
STANDARD_REFRACTION_K = 4 / 3
STANDARD_DM_DH = 0.118  # M-units per meter
DUCTING_K_FACTOR = 1000.0
K_FACTOR_TOLERANCE = 1e-6
K_FACTOR_MAX_ITERATIONS = 10

# International Standard Atmosphere (troposphere + isothermal tropopause layer)
ISA_T0 = 288.15  # Sea level temperature (K)
ISA_P0 = 1013.25  # Sea level pressure (hPa)
ISA_G = 9.80665  # Gravitational acceleration (m/s^2)
ISA_R = 287.058  # Specific gas constant for dry air (J/(kg K))
ISA_LAPSE_RATE = -0.0065  # Tropospheric lapse rate (K/m)
ISA_TROPOPAUSE_ALT = 11_000.0  # meters
ISA_TROPOPAUSE_TEMP = ISA_T0 + ISA_LAPSE_RATE * ISA_TROPOPAUSE_ALT
STANDARD_RELATIVE_HUMIDITY = 60.0  # percent
