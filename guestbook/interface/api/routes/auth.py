"""Authentication routes.

The external login page sends callers back to /auth/callback with a signed
session token; logout only clears the cookie.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import RedirectResponse

from guestbook.config import Settings
from guestbook.domain.service import AuthService, safe_continue
from guestbook.util.logging import get_logger

logger = get_logger(__name__)

# Cookie holding the signed session token; read by every route as `session_token`
SESSION_COOKIE = "session_token"

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


@router.get("/callback")
async def login_callback(
    auth_service: FromDishka[AuthService],
    settings: FromDishka[Settings],
    token: str,
    continue_to: str = Query(default="/", alias="continue"),
) -> RedirectResponse:
    """Complete login and return to the page that asked for it.

    Args:
        auth_service: Authentication domain service from DI
        settings: Application settings
        token: Signed session token issued by the identity provider
        continue_to: Site-relative path to return to

    Returns:
        Redirect to `continue_to` with the session cookie set

    Raises:
        HTTPException: 401 if the token is invalid or expired
    """
    user = auth_service.current_user(token)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired session token",
        )

    logger.info(f"User {user} logged in")

    response = RedirectResponse(
        safe_continue(continue_to), status_code=status.HTTP_302_FOUND
    )
    response.set_cookie(
        key=SESSION_COOKIE,
        value=token,
        max_age=settings.auth.session_expiry_days * 24 * 60 * 60,
        httponly=True,
        secure=settings.api.protocol == "https",
        samesite="lax",
    )
    return response


@router.get("/logout")
async def logout(
    settings: FromDishka[Settings],
    continue_to: str = Query(default="/", alias="continue"),
) -> RedirectResponse:
    """Clear the session cookie and return to `continue_to`."""
    response = RedirectResponse(
        safe_continue(continue_to), status_code=status.HTTP_302_FOUND
    )
    response.delete_cookie(key=SESSION_COOKIE)
    return response
