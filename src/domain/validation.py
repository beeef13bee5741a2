"""
Field validators - Pure predicates for email, phone and password formats.

Every predicate is total: it never raises and only answers accept/reject.
"""

import string

_EMAIL_CHARS = frozenset(string.ascii_letters + string.digits + "._@-")
_PHONE_DIGITS = frozenset("0123456789")
_PASSWORD_SPECIALS = frozenset("@$&")

PHONE_LENGTH = 10
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 12


def is_valid_email(email: str) -> bool:
    """
    Check the basic shape local@domain.ext.

    Structural checks run first; the allowed character set is checked
    last, over the whole (stripped) address.
    """
    email = email.strip()
    if not email:
        return False

    parts = email.split("@")
    if len(parts) != 2:
        return False
    local, domain = parts

    if not 1 <= len(local) <= 64:
        return False
    if local.startswith(".") or local.endswith("."):
        return False
    if ".." in local:
        return False

    if not 1 <= len(domain) <= 255:
        return False
    if "." not in domain:
        return False
    if domain.startswith((".", "-")) or domain.endswith((".", "-")):
        return False

    extension = domain[domain.rfind(".") + 1 :]
    if len(extension) < 2:
        return False

    return all(c in _EMAIL_CHARS for c in email)


def is_valid_phone(phone: str) -> bool:
    """Exactly ten ASCII digits."""
    return len(phone) == PHONE_LENGTH and all(c in _PHONE_DIGITS for c in phone)


def is_valid_password(password: str) -> bool:
    """
    Check length (6-12 bytes) and character class requirements.

    Requires at least one uppercase letter, one lowercase letter,
    one decimal digit and one of "@$&".
    """
    # Length is measured in UTF-8 bytes
    size = len(password.encode("utf-8", "surrogatepass"))
    if not PASSWORD_MIN_LENGTH <= size <= PASSWORD_MAX_LENGTH:
        return False

    has_upper = has_lower = has_digit = has_special = False
    for c in password:
        # First matching class wins
        if c.isupper():
            has_upper = True
        elif c.islower():
            has_lower = True
        elif c.isdecimal():
            has_digit = True
        elif c in _PASSWORD_SPECIALS:
            has_special = True

    return has_upper and has_lower and has_digit and has_special
