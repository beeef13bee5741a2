"""
Error mapping - Domain exceptions to HTTP responses.

Every error body has the shape {"error": "<message>"}.
Server faults are logged with detail and answered with a generic message.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.api.models import ErrorResponse
from src.domain.exceptions import (
    CredentialServiceError,
    DuplicateEmail,
    DuplicatePhone,
    InvalidCredentials,
    InvalidFormat,
    MissingField,
    ServerFault,
)
from src.domain.ports import Field

logger = logging.getLogger(__name__)

MALFORMED_BODY = "Cuerpo inválido"
TOKEN_ERROR = "Error generando token"

INVALID_FORMAT_MESSAGES = {
    Field.EMAIL: "Correo inválido",
    Field.PHONE: "Teléfono inválido",
    Field.PASSWORD: "Contraseña inválida",
}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


def to_response(exc: CredentialServiceError) -> JSONResponse:
    """
    Map a domain exception to its HTTP status and public message.

    Unknown subclasses fall through to a 500 with the generic message.
    """
    if isinstance(exc, MissingField):
        return error_response(status.HTTP_400_BAD_REQUEST, f"Falta el campo {exc.field.value}")
    if isinstance(exc, InvalidFormat):
        return error_response(status.HTTP_400_BAD_REQUEST, INVALID_FORMAT_MESSAGES[exc.field])
    if isinstance(exc, DuplicateEmail):
        return error_response(status.HTTP_409_CONFLICT, "El correo ya se encuentra registrado")
    if isinstance(exc, DuplicatePhone):
        return error_response(status.HTTP_409_CONFLICT, "El teléfono ya se encuentra registrado")
    if isinstance(exc, InvalidCredentials):
        return error_response(status.HTTP_401_UNAUTHORIZED, "Correo o contraseña incorrectos")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, TOKEN_ERROR)


async def domain_error_handler(request: Request, exc: CredentialServiceError) -> JSONResponse:
    if isinstance(exc, ServerFault):
        logger.error("Server fault on %s: %s", request.url.path, exc, exc_info=exc)
    return to_response(exc)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Malformed body on %s: %d validation error(s)", request.url.path, len(exc.errors()))
    return error_response(status.HTTP_400_BAD_REQUEST, MALFORMED_BODY)


def install_error_handlers(app: FastAPI) -> None:
    """Register the domain and request-validation handlers on an app."""
    app.add_exception_handler(CredentialServiceError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
