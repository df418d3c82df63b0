"""Tolerance constants shared by bend detection and width selection."""

# Bend angle exclusion band (degrees)
# Angles at or below this, or at or above 180 minus this, are treated as
# "no bend" (folded flat or collinear)
ANGLE_EPSILON_DEGREES: float = 0.001

# Width-exceeded tolerance (inches)
# A required width may exceed the maximum by this much before the design
# is rejected, so exact catalog matches are not flagged by rounding
WIDTH_TOLERANCE_INCHES: float = 1e-6

# Zero vector detection threshold
# Vectors with magnitude below this are considered zero-length
ZERO_MAGNITUDE: float = 1e-10
