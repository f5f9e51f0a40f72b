"""
API Models

Records returned by the JSONPlaceholder API. Fields whose JSON key differs
from the Python name declare it as an alias.
"""

from pydantic import BaseModel, ConfigDict, Field


class Comment(BaseModel):
    """Represents a comment from the API."""
    model_config = ConfigDict(populate_by_name=True)

    post_id: int = Field(alias="postId")
    id: int
    name: str
    email: str
    body: str


class Post(BaseModel):
    """Represents a post from the API."""
    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(alias="userId")
    id: int
    title: str
    body: str

    def summary(self, width: int = 40) -> str:
        """One-line label for logs."""
        title = self.title if len(self.title) <= width else self.title[:width - 3] + "..."
        return f"#{self.id} {title}"
