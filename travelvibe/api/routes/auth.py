import uuid
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from travelvibe.api.deps import get_store
from travelvibe.core.security import hash_password, verify_password, create_access_token
from travelvibe.db.errors import ConstraintError
from travelvibe.db.store import RecordStore
from travelvibe.schemas.auth import RegisterRequest, LoginRequest, UserOut

router = APIRouter(tags=["auth"])

@router.post("/auth/register", status_code=201)
def register(body: RegisterRequest, store: RecordStore = Depends(get_store)):
    if store.find_where("users", where={"email": body.email}):
        raise HTTPException(status_code=400, detail="User already exists")
    user_id = str(uuid.uuid4())
    try:
        store.insert("users", {
            "id": user_id,
            "name": body.name,
            "email": body.email,
            "phone": body.phone or None,
            "password": hash_password(body.password),
            "role": "USER",
        })
    except (IntegrityError, ConstraintError):
        # Lost a race with a concurrent registration for the same email
        raise HTTPException(status_code=400, detail="User already exists")
    return {
        "message": "User registered successfully",
        "user": UserOut(id=user_id, name=body.name, email=body.email, role="USER"),
    }

@router.post("/auth/login")
def login(body: LoginRequest, store: RecordStore = Depends(get_store)):
    users = store.find_where("users", where={"email": body.email})
    # Same response for unknown email and wrong password
    if not users or not verify_password(body.password, users[0]["password"]):
        raise HTTPException(status_code=401, detail="Invalid credentials")
    user = users[0]
    return {
        "message": "Login successful",
        "token": create_access_token(user["id"], user["email"], user["role"]),
        "user": UserOut(id=user["id"], name=user["name"], email=user["email"], role=user["role"]),
    }
