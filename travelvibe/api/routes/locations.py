from fastapi import APIRouter, Depends
from travelvibe.api.deps import get_store
from travelvibe.db.store import RecordStore

router = APIRouter(tags=["locations"])

@router.get("/locations", response_model=list[str])
def list_locations(store: RecordStore = Depends(get_store)):
    """Location names only, in id order."""
    return [loc["name"] for loc in store.find_all("locations")]
