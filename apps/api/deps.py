"""Request dependencies shared by the API routers."""

from typing import Optional

from fastapi import Header, HTTPException


def require_user(x_user_id: Optional[int] = Header(None)) -> int:
    """Caller id resolved by the upstream identity layer; 401 when absent."""
    if x_user_id is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return x_user_id
