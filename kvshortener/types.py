from datetime import timedelta
from typing import Any


# Type alias for configuration documents
type AppConfig = dict[str, Any]

# Seconds (int) or timedelta; 0 means no expiry
type TTLValue = int | timedelta
