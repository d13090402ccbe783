from fastapi import APIRouter, Depends
from travelvibe.api.deps import get_store, require_admin
from travelvibe.db.store import RecordStore
from travelvibe.schemas.auth import CallerIdentity

router = APIRouter(tags=["users"])

@router.get("/users")
def list_users(store: RecordStore = Depends(get_store),
               me: CallerIdentity = Depends(require_admin)):
    return [{k: v for k, v in u.items() if k != "password"} for u in store.find_all("users")]
