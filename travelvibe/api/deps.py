from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from pydantic import ValidationError

from travelvibe.core.security import read_identity
from travelvibe.db.store import RecordStore
from travelvibe.schemas.auth import CallerIdentity

bearer = HTTPBearer(auto_error=False)

def get_store(request: Request) -> RecordStore:
    return request.app.state.store

def get_current_user(creds: HTTPAuthorizationCredentials | None = Depends(bearer)) -> CallerIdentity:
    # Identity comes from the token alone; storage is not consulted, so a role
    # change only takes effect on the next login.
    if not creds:
        raise HTTPException(status_code=401, detail="Access token required")
    try:
        return read_identity(creds.credentials)
    except (JWTError, ValidationError):
        raise HTTPException(status_code=403, detail="Invalid token")

def require_admin(user: CallerIdentity = Depends(get_current_user)) -> CallerIdentity:
    if not user.is_admin:
        raise HTTPException(status_code=403, detail="Admin access required")
    return user
