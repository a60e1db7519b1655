GRACE_MINUTES = 30
DEFAULT_ROSTER_SIZE = 71

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True
