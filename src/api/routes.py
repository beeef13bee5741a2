"""
API routes - Registration and login endpoints.

This module defines the HTTP endpoints:
- POST /registro - Register a new identity
- POST /login    - Verify credentials and issue a signed token

Handlers are plain functions so FastAPI runs them on its threadpool.
Domain exceptions propagate to the handlers in src.api.errors.
"""

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_authentication_service, get_registration_service
from src.api.models import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from src.domain.authentication import AuthenticationService
from src.domain.registration import RegistrationService

router = APIRouter(tags=["auth"])


@router.post(
    "/registro",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Malformed body, missing or invalid field"},
        409: {"model": ErrorResponse, "description": "Email or phone already registered"},
    },
    summary="Register a new user",
)
def register(
    request_data: RegisterRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> RegisterResponse:
    """
    Register a new user.

    - **correo**: Email address, unique
    - **telefono**: 10-digit phone number, unique
    - **password**: 6-12 chars with uppercase, lowercase, digit and one of @$&
    """
    service.register(request_data.correo, request_data.telefono, request_data.password)
    return RegisterResponse(mensaje="Usuario registrado exitosamente")


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Malformed body or missing field"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
        500: {"model": ErrorResponse, "description": "Token could not be signed"},
    },
    summary="Log in and obtain a token",
    description="Returns a signed token valid for 24 hours and the login time.",
)
def login(
    request_data: LoginRequest,
    service: AuthenticationService = Depends(get_authentication_service),
) -> LoginResponse:
    """Verify credentials and return a signed token."""
    issued = service.login(request_data.correo, request_data.password)
    return LoginResponse(token=issued.token, fecha_inicio=issued.issued_at)
