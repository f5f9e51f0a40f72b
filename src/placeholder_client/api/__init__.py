"""
API Client Module

Provides a typed HTTP client for the JSONPlaceholder API.
"""

from .client import ApiClient, Parameters
from .codec import DecodingError, EncodingError, JSONDecoder, JSONEncoder
from .endpoints import CommentDetail, Comments, Endpoint, Posts
from .errors import APIError, APIErrorKind
from .models import Comment, Post
from .result import Failure, Result, Success

__all__ = [
    "ApiClient",
    "Parameters",
    "DecodingError",
    "EncodingError",
    "JSONDecoder",
    "JSONEncoder",
    "Endpoint",
    "Posts",
    "Comments",
    "CommentDetail",
    "APIError",
    "APIErrorKind",
    "Comment",
    "Post",
    "Result",
    "Success",
    "Failure",
]
