# user/services.py
import logging
from dataclasses import dataclass

from django_wishlist.exceptions import AuthenticationError, ConflictError
from django_wishlist.security import hash_password, issue_token, verify_password

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


@dataclass(frozen=True)
class AuthResult:
    token: str
    user: object


def register_user(store, name, email, password):
    if store.find_user_by_email(email) is not None:
        raise ConflictError("User already exists")

    user = store.create_user(name=name, email=email, password_hash=hash_password(password))
    logger.info("Registered user id=%s", user.pk)
    return AuthResult(token=issue_token(user.pk), user=user)


def login_user(store, email, password):
    # Unknown email and wrong password must be indistinguishable.
    user = store.find_user_by_email(email)
    if user is None:
        hash_password(password)
        logger.info("Login failed: unknown email")
        raise AuthenticationError(INVALID_CREDENTIALS)

    if not user.is_active or not verify_password(password, user.password):
        logger.info("Login failed for user id=%s", user.pk)
        raise AuthenticationError(INVALID_CREDENTIALS)

    return AuthResult(token=issue_token(user.pk), user=user)


def current_user(context):
    """The caller's user record, or None when the request is anonymous."""
    if not context.is_authenticated:
        return None
    user = context.store.find_user_by_id(context.user_id)
    if user is None or not user.is_active:
        return None
    return user
