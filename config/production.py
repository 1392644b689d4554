from .config import *  # noqa: F401,F403

import os

# Production logs go to a collector; keep them machine readable.
LOG_JSON = os.getenv("LOG_JSON", "1")
