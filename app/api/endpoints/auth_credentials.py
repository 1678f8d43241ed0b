# app/api/endpoints/auth_credentials.py

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from config.database import get_db
from app.models.auth_models import User
from app.schemas.auth_schema import AuthRequest, RegisterRequest, TokenResponse, UserResponse
from app.utils.security import hash_password, verify_password, jwt_for_user
from app.dependencies.auth import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

@router.post("/auth/register", status_code=status.HTTP_201_CREATED)
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    # 1) E-mail must be free
    existing_user = db.query(User).filter_by(email=data.email).first()
    if existing_user:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="E-mail already registered."
        )

    # 2) Create the local user
    user = User(
        name=data.name,
        email=data.email,
        password_hash=hash_password(data.password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user %s", user.id)

    return {
        "msg": "User created successfully.",
        "user_id": user.id,
        "email": user.email,
        "access_token": jwt_for_user(user.email),
        "token_type": "bearer",
    }

@router.post("/auth/login", response_model=TokenResponse)
def login(data: AuthRequest, db: Session = Depends(get_db)):
    user = db.query(User).filter_by(email=data.email).first()
    if not user or not verify_password(data.password, user.password_hash):
        logger.warning("Failed login for %s", data.email)
        raise HTTPException(status_code=401, detail="Invalid credentials")

    return {
        "access_token": jwt_for_user(email=user.email),
        "token_type": "bearer",
        "user_id": user.id,
    }

@router.get("/user", response_model=UserResponse)
def read_current_user(current_user: User = Depends(get_current_user)):
    return current_user
