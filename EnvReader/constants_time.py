"""
Time-unit constants for building timeouts and intervals from env vars.

SECONDS/MINUTES/HOURS/DAYS are in milliseconds, the SECONDS_PER_* values
are plain second counts.
"""

# ============================================================================
# Second Counts
# ============================================================================

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * 60
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR

# ============================================================================
# Millisecond Units
# ============================================================================

SECONDS = 1000
"""In milliseconds"""

MINUTES = 60 * SECONDS
"""In milliseconds"""

HOURS = 60 * MINUTES
"""In milliseconds"""

DAYS = 24 * HOURS
"""In milliseconds"""
