from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from edulearn.api.deps import get_db, get_current_account
from edulearn.core.security import create_user_token
from edulearn.models import User
from edulearn.schemas.auth import LoginRequest, RegisterRequest, TokenResponse, UserProfileOut
from edulearn.services.auth import authenticate_user, register_user

router = APIRouter()


@router.post("/register", response_model=TokenResponse)
def register(request: RegisterRequest, db: Session = Depends(get_db)) -> TokenResponse:
    user = register_user(db, name=request.name, email=request.email, password=request.password)
    return TokenResponse(token=create_user_token(user.id))


@router.post("/login", response_model=TokenResponse)
def login(request: LoginRequest, db: Session = Depends(get_db)) -> TokenResponse:
    user = authenticate_user(db, request.email, request.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid credentials")
    return TokenResponse(token=create_user_token(user.id))


@router.get("/me", response_model=UserProfileOut)
def me(current_user: User = Depends(get_current_account)) -> UserProfileOut:
    return UserProfileOut(
        id=current_user.id,
        name=current_user.name,
        email=current_user.email,
        avatar=current_user.avatar,
        preferences={"theme": current_user.theme, "language": current_user.language},
        bookmarks=[content.id for content in current_user.bookmarks],
    )
