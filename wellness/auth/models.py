# -*- coding: utf-8 -*-
"""Auth — Pydantic models."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, Field


class SignupRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=8, max_length=128)


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=1, max_length=128)


class VerifyRequest(BaseModel):
    token: str = Field(..., min_length=1)


class UserPublic(BaseModel):
    id: str
    email: str
    created_at: str


class AuthResponse(BaseModel):
    success: bool = True
    user: UserPublic
    token: str


class UserResponse(BaseModel):
    success: bool = True
    user: UserPublic


class VerifyResponse(BaseModel):
    success: bool = True
    user: Dict[str, Any] = Field(..., description="Decoded token claims")
