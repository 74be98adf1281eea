"""Shared constants for reporttime defaults and artefact locations."""

REPORTTIME_HOME_EXT = ".reporttime"   # user-level state/config directory suffix

# Seconds a command must run before it is reported
DEFAULT_THRESHOLD = 5.0

# Fractional-second digits shown in reports
DEFAULT_PRECISION = 3
MAX_PRECISION = 9

# Clock samples used to estimate sampling overhead
DEFAULT_CALIBRATION_LOOPS = 5

# Command that shows the previous report without being timed itself
DEFAULT_BYPASS_COMMAND = "timelast"

# Threshold spellings that disable reporting entirely
NEVER_VALUES = {"no", "never", "off"}
