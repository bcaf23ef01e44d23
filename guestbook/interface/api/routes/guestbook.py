"""Guestbook routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Form, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from guestbook.application.usecase.greeting import (
    ListGreetingsRequest,
    ListGreetingsUseCase,
    SignGuestbookRequest,
    SignGuestbookUseCase,
)
from guestbook.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from guestbook.config import GuestbookSettings
from guestbook.domain.error import BadRequestError, StoreUnavailableError
from guestbook.domain.service import AuthService
from guestbook.domain.value import RequestContext, VoteOutcome, guestbook_key
from guestbook.interface.api.rendering import render_guestbook
from guestbook.util.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["guestbook"], route_class=DishkaRoute)


def build_context(
    auth_service: AuthService,
    guestbook_settings: GuestbookSettings,
    session_token: str | None,
) -> RequestContext:
    """Build the explicit per-request context from the session cookie."""
    return RequestContext(
        guestbook=guestbook_key(guestbook_settings.name),
        user=auth_service.current_user(session_token),
    )


def redirect_home() -> RedirectResponse:
    return RedirectResponse("/", status_code=status.HTTP_302_FOUND)


@router.get("/", response_class=HTMLResponse)
async def root(
    list_greetings_use_case: FromDishka[ListGreetingsUseCase],
    auth_service: FromDishka[AuthService],
    guestbook_settings: FromDishka[GuestbookSettings],
    session_token: str | None = Cookie(default=None),
) -> HTMLResponse:
    """Render the most recent greetings with their scores.

    Shows a login link to anonymous callers and a logout link otherwise.

    Raises:
        HTTPException: 500 if the greeting query fails
    """
    context = build_context(auth_service, guestbook_settings, session_token)

    try:
        response = await list_greetings_use_case.execute(
            ListGreetingsRequest(
                context=context, limit=guestbook_settings.listing_limit
            )
        )
    except StoreUnavailableError as e:
        logger.error(f"Listing failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )

    if context.is_authenticated:
        page = render_guestbook(
            response.greetings, logout_url=auth_service.logout_url("/")
        )
    else:
        page = render_guestbook(
            response.greetings, login_url=auth_service.login_url("/")
        )

    return HTMLResponse(page)


@router.post("/sign")
async def sign(
    sign_guestbook_use_case: FromDishka[SignGuestbookUseCase],
    auth_service: FromDishka[AuthService],
    guestbook_settings: FromDishka[GuestbookSettings],
    content: str = Form(default=""),
    session_token: str | None = Cookie(default=None),
) -> RedirectResponse:
    """Post a greeting, attributed to the caller if identified.

    Raises:
        HTTPException: 500 if the write fails
    """
    context = build_context(auth_service, guestbook_settings, session_token)

    try:
        await sign_guestbook_use_case.execute(
            SignGuestbookRequest(context=context, content=content)
        )
    except StoreUnavailableError as e:
        logger.error(f"Posting failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )

    return redirect_home()


@router.get("/vote")
async def vote(
    request: Request,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    auth_service: FromDishka[AuthService],
    guestbook_settings: FromDishka[GuestbookSettings],
    session_token: str | None = Cookie(default=None),
) -> RedirectResponse:
    """Vote on a greeting.

    Anonymous callers are sent to login and come back to the same vote.
    Every other outcome redirects to the listing.

    Raises:
        HTTPException: 400 on a malformed greeting id, 500 only if vote
            store errors are configured to surface
    """
    context = build_context(auth_service, guestbook_settings, session_token)

    try:
        response = await cast_vote_use_case.execute(
            CastVoteRequest(
                context=context,
                greeting=request.query_params.getlist("greeting"),
            )
        )
    except BadRequestError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except StoreUnavailableError as e:
        logger.error(f"Vote failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )

    if response.outcome == VoteOutcome.AUTHENTICATION_REQUIRED:
        return RedirectResponse(
            auth_service.login_url(response.continue_to),
            status_code=status.HTTP_302_FOUND,
        )

    return redirect_home()
