"""Shared unit constants.

Centralizes the conversion factors used by the converter and the split
logic so we can document and adjust them in one place.
"""

from enum import Enum

# Distance of one statute mile in meters
MILE_M = 1609.34

# Distance of one kilometre in meters
KILOMETRE_M = 1000.0

SECONDS_PER_HOUR = 3600


class SplitUnit(str, Enum):
    kilometre = "k"
    mile = "m"
