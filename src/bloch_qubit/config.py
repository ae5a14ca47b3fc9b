"""Settings for bloch_qubit, read from environment variables."""

import os
from pathlib import Path
from typing import Optional

# Display settings
DIGITS = int(os.getenv("BLOCH_DIGITS", "3"))
POINTER_COLOR = os.getenv("BLOCH_POINTER_COLOR", "#ffd166")
SPHERE_COLOR = os.getenv("BLOCH_SPHERE_COLOR", "#1e90ff")

# Randomness
_seed = os.getenv("BLOCH_SEED")
SEED: Optional[int] = int(_seed) if _seed not in (None, "") else None

# Logging settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
_log_file = os.getenv("LOG_FILE")
LOG_FILE: Optional[Path] = Path(_log_file) if _log_file else None
