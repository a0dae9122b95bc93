from pydantic import BaseModel


class Pagination(BaseModel):
    """Window applied to a list query and the number of items returned"""

    limit: int
    offset: int
    count: int
