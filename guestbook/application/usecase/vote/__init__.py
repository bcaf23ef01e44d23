"""Vote use cases."""

from .cast_vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    parse_greeting_id,
    vote_path,
)

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "parse_greeting_id",
    "vote_path",
]
