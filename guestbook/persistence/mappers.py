"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through an ORM.
"""

from typing import Any, Dict

from guestbook.domain.model import Greeting, Vote
from guestbook.domain.value import (
    GreetingId,
    GreetingKey,
    Identity,
    VoteId,
    guestbook_key,
)


def row_to_greeting(row: Dict[str, Any]) -> Greeting:
    """Convert database row to Greeting domain model.

    Args:
        row: Database row as dict

    Returns:
        Greeting domain model
    """
    return Greeting(
        id=GreetingId(row["id"]),
        guestbook=guestbook_key(row["guestbook"]),
        author=row["author"] or "",
        content=row["content"],
        created_at=row["created_at"],
    )


def greeting_to_dict(greeting: Greeting) -> Dict[str, Any]:
    """Convert Greeting domain model to database dict.

    The id is left out so the database allocates it.

    Args:
        greeting: Greeting domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "guestbook": greeting.guestbook.name,
        "author": greeting.author,
        "content": greeting.content,
        "created_at": greeting.created_at,
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(row["id"]),
        topic=GreetingKey(
            guestbook=guestbook_key(row["guestbook"]),
            id=GreetingId(row["topic_id"]),
        ),
        author=Identity(row["author"]),
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "guestbook": vote.guestbook.name,
        "topic_id": vote.topic.id,
        "author": vote.author.root,
    }
