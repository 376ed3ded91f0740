# -*- coding: utf-8 -*-
"""Auth — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from . import service
from .models import (
    AuthResponse,
    LoginRequest,
    SignupRequest,
    UserPublic,
    UserResponse,
    VerifyRequest,
    VerifyResponse,
)
from .security import get_current_user

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def _user_public(row: dict) -> UserPublic:
    return UserPublic(id=row["id"], email=row["email"], created_at=row["created_at"])


@router.post("/signup", status_code=201, response_model=AuthResponse, summary="Create an account")
def signup(request: SignupRequest):
    user, token = service.signup(request.email, request.password)
    return AuthResponse(user=_user_public(user), token=token)


@router.post("/login", response_model=AuthResponse, summary="Login")
def login(request: LoginRequest):
    user, token = service.login(request.email, request.password)
    return AuthResponse(user=_user_public(user), token=token)


@router.post("/verify", response_model=VerifyResponse, summary="Verify a bearer token")
def verify(request: VerifyRequest):
    return VerifyResponse(user=service.verify_token(request.token))


@router.get("/me", response_model=UserResponse, summary="Get current user")
def me(user: dict = Depends(get_current_user)):
    return UserResponse(user=_user_public(user))
