# jobtracker/core/auth.py
from typing import Any, Optional


async def get_current_user() -> Optional[Any]:
    # No authentication yet: every caller is anonymous and may read or write every record
    return None
