"""Dependencies for FastAPI routes"""

import logging
from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from propman.core.auth import verify_access_token
from propman.repositories import SYSTEM_ACTOR
from propman.utils.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

# No route requires a token; one is only read to attribute changes
optional_bearer_scheme = HTTPBearer(auto_error=False)


async def get_token_username(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(optional_bearer_scheme)]
) -> Optional[str]:
    """Username from a valid bearer access token, None otherwise"""
    if not credentials:
        return None

    try:
        payload = verify_access_token(credentials.credentials)
    except AuthenticationError as e:
        logger.warning(f"Ignoring bearer token: {e.message}")
        return None
    return payload.get("unique_name") or None


async def get_current_actor(
    username: Annotated[Optional[str], Depends(get_token_username)]
) -> str:
    """Name stamped into action_by, falling back to the system actor"""
    return username or SYSTEM_ACTOR
