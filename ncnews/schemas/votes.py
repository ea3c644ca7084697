from pydantic import BaseModel, Field, StrictInt

from ncnews.core.database import MAX_INT


class VotesIn(BaseModel):
    """PATCH body for articles and comments. ``inc_votes`` may be negative."""
    inc_votes: StrictInt = Field(..., ge=-MAX_INT - 1, le=MAX_INT)
