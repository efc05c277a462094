from fastapi import APIRouter, Depends, HTTPException, status, Response
from sqlmodel import Session, select
from pydantic import BaseModel
from typing import Optional
import logging
from app.api.deps import get_db, access_security, get_current_user
from app.models.user import User, UserRole
from app.core.security import verify_password

router = APIRouter(prefix="/api/auth", tags=["auth"])

logger = logging.getLogger(__name__)


# === Schemas ===

class LoginRequest(BaseModel):
    email: str
    password: str


class UserResponse(BaseModel):
    id: int
    email: str
    name: Optional[str]
    role: UserRole

    class Config:
        from_attributes = True


# === Routes ===

@router.post("/login", response_model=UserResponse)
def login(data: LoginRequest, response: Response, db: Session = Depends(get_db)):
    user = db.exec(select(User).where(User.email == data.email)).first()
    
    if not user or not verify_password(data.password, user.password_hash):
        logger.warning("Failed login for %s", data.email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials"
        )
    
    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account is inactive"
        )
    
    # Установка JWT cookie
    subject = {"id": user.id, "role": user.role.value}
    access_token = access_security.create_access_token(subject=subject)
    access_security.set_access_cookie(response, access_token)
    
    return user


@router.post("/logout")
def logout(response: Response):
    access_security.unset_access_cookie(response)
    return {"message": "Logged out"}


@router.get("/me", response_model=UserResponse)
def me(current_user: User = Depends(get_current_user)):
    return current_user
