"""
Auth component - sign-up, sign-in, sign-out and session subscription.
"""

from ._impl import AUTH_ERROR_MESSAGES, auth_failure, message_for_code
from .component import (
    load_profile,
    profile_email,
    run_register,
    run_sign_in,
    run_sign_out,
    watch_current_user,
)
from .models import AuthOutput, RegisterInput, SignInInput
from .ports import ProfileDocumentsPort

__all__ = [
    "run_register",
    "run_sign_in",
    "run_sign_out",
    "watch_current_user",
    "load_profile",
    "profile_email",
    "RegisterInput",
    "SignInInput",
    "AuthOutput",
    "ProfileDocumentsPort",
    "AUTH_ERROR_MESSAGES",
    "auth_failure",
    "message_for_code",
]
