"""
Registration domain service - Identity admission.

This module contains the business logic for registering a new identity.
Checks are fail-fast and run in a fixed, externally observable order:

1. Presence:  email -> phone -> password   (MissingField)
2. Format:    email -> phone -> password   (InvalidFormat)
3. Uniqueness: email -> phone              (DuplicateEmail / DuplicatePhone)

The uniqueness check and the insertion are delegated to the registry's
atomic claim, so the registry is only mutated when every check passes.
"""

import logging
from dataclasses import dataclass

from .exceptions import DuplicateEmail, DuplicatePhone, InvalidFormat, MissingField
from .ports import ClaimResult, Field, Identity, IdentityRegistry
from .validation import is_valid_email, is_valid_password, is_valid_phone

logger = logging.getLogger(__name__)


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Orchestrates validation, duplicate detection and insertion.
    """

    registry: IdentityRegistry

    def register(self, email: str, phone: str, secret: str) -> Identity:
        """
        Register a new identity.

        Fields are stored verbatim; no normalization is applied.

        Args:
            email: User's email address
            phone: 10-digit phone number
            secret: User's password

        Returns:
            The newly registered identity

        Raises:
            MissingField: If a field is empty
            InvalidFormat: If a field fails its validator
            DuplicateEmail: If the email is already registered
            DuplicatePhone: If the phone is already registered
        """
        self._check_present(email=email, phone=phone, secret=secret)
        self._check_format(email=email, phone=phone, secret=secret)

        identity = Identity(email=email, phone=phone, secret=secret)
        result = self.registry.claim(identity)

        if result == ClaimResult.EMAIL_TAKEN:
            logger.info("Registration rejected: email already registered")
            raise DuplicateEmail(email)
        if result == ClaimResult.PHONE_TAKEN:
            logger.info("Registration rejected: phone already registered")
            raise DuplicatePhone(phone)

        logger.info("Identity registered: %s", email)
        return identity

    def _check_present(self, email: str, phone: str, secret: str) -> None:
        for field, value in ((Field.EMAIL, email), (Field.PHONE, phone), (Field.PASSWORD, secret)):
            if value == "":
                logger.info("Missing field %s in registration request", field.value)
                raise MissingField(field)

    def _check_format(self, email: str, phone: str, secret: str) -> None:
        if not is_valid_email(email):
            raise InvalidFormat(Field.EMAIL)
        if not is_valid_phone(phone):
            raise InvalidFormat(Field.PHONE)
        if not is_valid_password(secret):
            raise InvalidFormat(Field.PASSWORD)
