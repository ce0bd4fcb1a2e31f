from __future__ import annotations

from dataclasses import dataclass

from club.models.topic import Topic


@dataclass(frozen=True)
class Actor:
    user_id: int | None = None
    is_admin: bool = False

    @property
    def is_anonymous(self) -> bool:
        return self.user_id is None


ANONYMOUS = Actor()


def is_admin(actor: Actor) -> bool:
    return bool(actor.is_admin) and not actor.is_anonymous


def can_operate(actor: Actor, topic: Topic) -> bool:
    """Authors may change their own topics, admins may change any topic."""
    if actor.is_anonymous:
        return False
    return is_admin(actor) or topic.create_user_id == actor.user_id
