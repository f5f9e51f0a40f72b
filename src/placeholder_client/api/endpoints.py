"""
Endpoint Module

Route descriptors for the JSONPlaceholder API. Each endpoint is an
immutable value that knows its URL path.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Endpoint(ABC):
    """Base class for a named API route."""

    @abstractmethod
    def path(self) -> str:
        """URL path of this route, relative to the base URL."""

    @staticmethod
    def posts() -> "Posts":
        return Posts()

    @staticmethod
    def comments() -> "Comments":
        return Comments()

    @staticmethod
    def comment_detail(comment_id: int) -> "CommentDetail":
        return CommentDetail(comment_id)


@dataclass(frozen=True)
class Posts(Endpoint):
    """All posts."""

    def path(self) -> str:
        return "/posts"


@dataclass(frozen=True)
class Comments(Endpoint):
    """All comments."""

    def path(self) -> str:
        return "/comments"


@dataclass(frozen=True)
class CommentDetail(Endpoint):
    """A single comment by id."""
    comment_id: int

    def __post_init__(self):
        # bool is an int subclass but never a valid id
        if not isinstance(self.comment_id, int) or isinstance(self.comment_id, bool):
            raise ValueError(f"comment_id must be an integer, got {self.comment_id!r}")
        if self.comment_id < 0:
            raise ValueError(f"comment_id must be non-negative, got {self.comment_id}")

    def path(self) -> str:
        return f"/comments/{self.comment_id}"
