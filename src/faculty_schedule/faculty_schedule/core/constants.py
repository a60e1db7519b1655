"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_GRACE_MINUTES = 30
# Buffer hard-coded by the mobile client (3000 minutes, about 50 hours).
LEGACY_GRACE_MINUTES = 3000
DEFAULT_ROSTER_SIZE = 71
MINUTES_PER_DAY = 24 * 60
