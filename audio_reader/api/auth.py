"""Session access. Sessions are issued elsewhere; this side only reads them."""

from flask import session

from audio_reader.processor.exceptions import ForbiddenError, NotAuthenticatedError


def current_user_id() -> str:
    """Return the session's user id.

    Raises:
        NotAuthenticatedError: if there is no session.
    """
    user_id = session.get("userId")
    if not user_id:
        raise NotAuthenticatedError("Unauthorized")
    return str(user_id)


def require_same_user(claimed_user_id: str | None) -> str:
    """Check a user id sent in the request body against the session."""
    user_id = current_user_id()
    if claimed_user_id != user_id:
        raise ForbiddenError("Unauthorized")
    return user_id
