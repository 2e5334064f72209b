from typing import Dict, Optional
from fastapi import Header


async def get_client_info(
    x_forwarded_for: Optional[str] = Header(default=None),
    user_agent: Optional[str] = Header(default=None),
) -> Dict[str, str]:
    """
    Client IP and user agent recorded with analytics events
    """
    return {
        "ip_address": x_forwarded_for or "unknown",
        "user_agent": user_agent or "unknown",
    }
