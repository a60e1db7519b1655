import os

# Minutes after a class ends during which attendance may still be marked.
# Set GRACE_MINUTES=3000 to reproduce the mobile client's buffer.
GRACE_MINUTES = int(os.getenv("GRACE_MINUTES", "30"))

# Placeholder roster size when the student directory has no class list
DEFAULT_ROSTER_SIZE = int(os.getenv("DEFAULT_ROSTER_SIZE", "71"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True
