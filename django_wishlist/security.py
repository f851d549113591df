"""
Password hashing and bearer tokens.

Passwords go through Django's hasher framework (salted, the algorithm is
chosen by ``PASSWORD_HASHERS``).  Tokens are simplejwt access tokens
carrying the user id under the ``userId`` claim and expiring one hour
after issuance; the signing key comes from ``SIMPLE_JWT["SIGNING_KEY"]``.
"""
import logging

from django.contrib.auth.hashers import check_password, make_password
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def hash_password(plaintext):
    """Return a salted one-way hash of ``plaintext``."""
    return make_password(plaintext)


def verify_password(plaintext, hashed):
    """True when ``plaintext`` is the password ``hashed`` was made from."""
    if not hashed:
        return False
    return check_password(plaintext, hashed)


def issue_token(user_id):
    token = AccessToken()
    token[api_settings.USER_ID_CLAIM] = str(user_id)
    return str(token)


def validate_token(token):
    """
    Return the user id embedded in ``token``, or ``None``.

    Bad signatures, expired or malformed tokens and tokens without a user
    id claim all come back as ``None``; this function does not raise.
    """
    if not token:
        return None
    try:
        access = AccessToken(token)
    except TokenError as exc:
        logger.debug("Rejected bearer token: %s", exc)
        return None
    return access.get(api_settings.USER_ID_CLAIM)


def token_from_header(header):
    """Strip the ``Bearer`` prefix from an Authorization header value."""
    if not header:
        return None
    if header.startswith(BEARER_PREFIX):
        return header[len(BEARER_PREFIX):].strip() or None
    return None
