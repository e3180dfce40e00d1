from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
import jwt

from backend.auth import jwt_handler

security = HTTPBearer()

ADMIN_ROLE = "admin"


def get_current_identity(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> dict:
    token = credentials.credentials
    try:
        payload = jwt_handler.decode_access_token(token)
    except jwt.PyJWTError as exc:
        raise HTTPException(status_code=401, detail="Invalid token") from exc

    # role may be null for system users provisioned without one
    if payload.get("id") is None or "role" not in payload:
        raise HTTPException(status_code=401, detail="Invalid token subject")
    return {"id": payload["id"], "role": payload["role"]}


def require_admin(current_identity: dict = Depends(get_current_identity)) -> dict:
    if current_identity["role"] != ADMIN_ROLE:
        raise HTTPException(status_code=403, detail="Admin access required")
    return current_identity
