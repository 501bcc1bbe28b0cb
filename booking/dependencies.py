"""FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from booking.database import get_db


class PageParams:
    """Common ``page``/``pageSize`` query parameters."""

    def __init__(
        self,
        page: int = Query(1, ge=1),
        page_size: int = Query(10, ge=1, le=100, alias="pageSize"),
    ):
        """Capture page number and page size."""
        self.page = page
        self.page_size = page_size


# Type aliases for dependency injection
DatabaseSession = Annotated[AsyncSession, Depends(get_db)]
Paging = Annotated[PageParams, Depends()]
