import logging
from collections.abc import Callable

from linksaver.domain.entities import USERS_COLLECTION, User, UserProfile
from linksaver.domain.failures import Failure
from linksaver.ports.identity import AuthListener, IdentityProviderError, IdentityProviderPort

from ._impl import auth_failure, credentials_missing
from .models import AuthOutput, RegisterInput, SignInInput
from .ports import ProfileDocumentsPort

logger = logging.getLogger(__name__)


def run_register(
    inp: RegisterInput,
    identity: IdentityProviderPort,
    documents: ProfileDocumentsPort,
) -> AuthOutput:
    """
    Create the account, then write the initial profile document.

    The two writes are not transactional. A failed profile write is logged
    and the registration still succeeds; readers tolerate the missing
    document.
    """
    missing = credentials_missing(inp.email, inp.password)
    if missing:
        return AuthOutput(success=False, failure=missing)

    try:
        user = identity.create_user(inp.email, inp.password)
    except IdentityProviderError as e:
        logger.warning(f"Registration rejected: {e.code}")
        return AuthOutput(success=False, failure=auth_failure(e.code))
    except Exception as e:
        logger.error(f"Registration failed: {e}")
        return AuthOutput(success=False, failure=Failure.transport())

    try:
        documents.set(USERS_COLLECTION, user.uid, {"email": user.email})
        profile_written = True
    except Exception as e:
        logger.warning(f"Profile document not written for {user.uid}: {e}")
        profile_written = False

    return AuthOutput(user=user, success=True, profile_written=profile_written)


def run_sign_in(inp: SignInInput, identity: IdentityProviderPort) -> AuthOutput:
    missing = credentials_missing(inp.email, inp.password)
    if missing:
        return AuthOutput(success=False, failure=missing)

    try:
        user = identity.sign_in(inp.email, inp.password)
    except IdentityProviderError as e:
        logger.warning(f"Sign-in rejected: {e.code}")
        return AuthOutput(success=False, failure=auth_failure(e.code))
    except Exception as e:
        logger.error(f"Sign-in failed: {e}")
        return AuthOutput(success=False, failure=Failure.transport())

    return AuthOutput(user=user, success=True)


def run_sign_out(identity: IdentityProviderPort) -> AuthOutput:
    try:
        identity.sign_out()
    except Exception as e:
        logger.error(f"Sign-out failed: {e}")
        return AuthOutput(success=False, failure=Failure.transport())

    logger.info("Signed out")
    return AuthOutput(success=True)


def watch_current_user(
    identity: IdentityProviderPort, listener: AuthListener
) -> Callable[[], None]:
    """
    Subscribe to session changes.

    The listener receives the present user (or None) right away and again
    on every change. Returns the unsubscribe callable.
    """
    unsubscribe = identity.add_listener(listener)
    listener(identity.current_user())
    return unsubscribe


def load_profile(user: User, documents: ProfileDocumentsPort) -> UserProfile:
    """Read the profile, treating a missing or unreadable document as empty."""
    try:
        data = documents.get(USERS_COLLECTION, user.uid)
    except Exception as e:
        logger.error(f"Failed to load profile for {user.uid}: {e}")
        data = None

    if data is None:
        return UserProfile(uid=user.uid, email=user.email)

    profile = UserProfile.from_document(user.uid, data)
    if not profile.email:
        profile = profile.model_copy(update={"email": user.email})
    return profile


def profile_email(user: User, documents: ProfileDocumentsPort) -> str:
    return load_profile(user, documents).email or user.email
