from .config import *  # noqa: F401,F403

import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
