"""
Placeholder API Client

Typed GET/POST helpers for the JSONPlaceholder REST API.
"""

from .api import (
    APIError,
    APIErrorKind,
    ApiClient,
    Comment,
    CommentDetail,
    Comments,
    Endpoint,
    Failure,
    Post,
    Posts,
    Result,
    Success,
)

__version__ = "0.1.0"

__all__ = [
    "ApiClient",
    "APIError",
    "APIErrorKind",
    "Endpoint",
    "Posts",
    "Comments",
    "CommentDetail",
    "Comment",
    "Post",
    "Result",
    "Success",
    "Failure",
]
