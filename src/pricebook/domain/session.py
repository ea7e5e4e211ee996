"""User session and authentication lifecycle."""

from enum import Enum
from typing import Optional

from pricebook.domain.errors import AuthError, not_authenticated

DEMO_USER_ID = "demo-user"


class AuthState(Enum):
    """Lifecycle of a user session."""

    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATING = "authenticating"
    AUTHENTICATED = "authenticated"
    FAILED = "failed"


class UserSession:
    """Tracks who is signed in for the current run.

    A session starts unauthenticated. Signing in moves it through
    AUTHENTICATING to either AUTHENTICATED or FAILED; purchases can only be
    logged from an AUTHENTICATED session.
    """

    def __init__(self):
        """Initialize an unauthenticated session."""
        self.state = AuthState.UNAUTHENTICATED
        self.user_id: Optional[str] = None
        self.is_demo = False

    @property
    def is_authenticated(self) -> bool:
        return self.state is AuthState.AUTHENTICATED

    def sign_in(self, user_id: Optional[str]) -> None:
        """Sign in as the given user.

        Args:
            user_id: Opaque user identifier supplied by configuration

        Raises:
            AuthError: If no usable user identifier was supplied
        """
        self.state = AuthState.AUTHENTICATING
        user_id = (user_id or "").strip()
        if not user_id:
            self.state = AuthState.FAILED
            self.user_id = None
            raise AuthError("No user ID configured; set PRICEBOOK_USER_ID to sign in")

        self.user_id = user_id
        self.state = AuthState.AUTHENTICATED

    def sign_in_demo(self) -> None:
        """Sign in as the local demo user used with the JSON blob store."""
        self.sign_in(DEMO_USER_ID)
        self.is_demo = True

    def sign_out(self) -> None:
        """Return to the unauthenticated state."""
        self.state = AuthState.UNAUTHENTICATED
        self.user_id = None
        self.is_demo = False

    def require_authenticated(self) -> str:
        """Return the signed-in user ID.

        Raises:
            AuthError: If the session is not authenticated
        """
        if not self.is_authenticated or self.user_id is None:
            raise AuthError(not_authenticated())
        return self.user_id
