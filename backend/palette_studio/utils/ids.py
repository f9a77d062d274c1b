"""
Palette Studio Run ID Utilities
Generate unique run IDs for log correlation.
"""
import uuid
from datetime import datetime


def generate_request_id(prefix: str = "pal") -> str:
    """
    Generate a unique request ID for tracking.

    Args:
        prefix: Short tag naming the flow that owns the ID

    Returns:
        Unique request ID string of the form ``prefix-YYYYmmddHHMMSS-xxxxxxxx``
    """
    timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
    short_uuid = str(uuid.uuid4())[:8]
    return f"{prefix}-{timestamp}-{short_uuid}"
