from fastapi import APIRouter, Depends

from wiremit.db.dal import Database
from wiremit.models.user import LoginIn, SignupIn, UserOut
from wiremit.routers.deps import get_db
from wiremit.services import auth

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=UserOut, status_code=201, summary="Create an account")
async def signup(payload: SignupIn, db: Database = Depends(get_db)):
    user = auth.signup(
        db,
        name=payload.name,
        email=payload.email,
        password=payload.password,
        confirm_password=payload.confirm_password,
    )
    return UserOut(**user)


@router.post("/login", response_model=UserOut, summary="Sign in")
async def login(payload: LoginIn, db: Database = Depends(get_db)):
    return UserOut(**auth.login(db, email=payload.email, password=payload.password))
