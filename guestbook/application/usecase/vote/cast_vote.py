"""Cast vote use case."""

import re
from urllib.parse import urlencode

from pydantic import BaseModel

from guestbook.application.usecase.base import BaseUseCase
from guestbook.domain.error import BadRequestError
from guestbook.domain.service import VoteService
from guestbook.domain.value import MAX_ID, GreetingId, RequestContext, VoteOutcome

_DECIMAL = re.compile(r"[+-]?[0-9]+")


class CastVoteRequest(BaseModel):
    """Cast vote request.

    `greeting` holds every value of the `greeting` query parameter, unparsed.
    """

    context: RequestContext
    greeting: list[str]


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    outcome: VoteOutcome
    greeting_id: int
    # Where to resume after login; set only for AUTHENTICATION_REQUIRED
    continue_to: str | None = None


def parse_greeting_id(values: list[str]) -> GreetingId:
    """Parse the vote target from raw query values.

    Exactly one base-10 value in [0, 2**63 - 1] is accepted.

    Raises:
        BadRequestError: On a missing, repeated or malformed value
    """
    if len(values) != 1:
        raise BadRequestError("Exactly one greeting id is required")

    raw = values[0]
    if not _DECIMAL.fullmatch(raw):
        raise BadRequestError(f"Malformed greeting id: {raw!r}")

    value = int(raw)
    if value < 0 or value > MAX_ID:
        raise BadRequestError(f"Greeting id out of range: {raw!r}")

    return GreetingId(value)


def vote_path(greeting_id: int) -> str:
    """Site-relative URL that casts a vote on a greeting."""
    return f"/vote?{urlencode({'greeting': greeting_id})}"


class CastVoteUseCase(
    BaseUseCase[CastVoteRequest, CastVoteResponse]
):
    """Use case for voting on a greeting."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Steps:
        1. Validate the target id (no store access on failure)
        2. Anonymous callers get AUTHENTICATION_REQUIRED with a continue
           target that repeats this vote
        3. Delegate duplicate check and write to the vote service

        Args:
            request: Cast vote request

        Returns:
            Vote outcome

        Raises:
            BadRequestError: If the target id is malformed
            StoreUnavailableError: If the write fails and store errors are surfaced
        """
        greeting_id = parse_greeting_id(request.greeting)

        outcome = await self.vote_service.cast_vote(request.context, greeting_id)

        return CastVoteResponse(
            outcome=outcome,
            greeting_id=greeting_id,
            continue_to=(
                vote_path(greeting_id)
                if outcome == VoteOutcome.AUTHENTICATION_REQUIRED
                else None
            ),
        )
