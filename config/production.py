import os

GRACE_MINUTES = int(os.getenv("GRACE_MINUTES", "30"))
DEFAULT_ROSTER_SIZE = int(os.getenv("DEFAULT_ROSTER_SIZE", "71"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False
