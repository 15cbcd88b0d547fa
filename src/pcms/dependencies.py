"""Shared FastAPI dependencies.

Reusable type aliases and dependency functions that routers import.
Defined here (not in main.py) to avoid circular imports when routers
are registered in main.
"""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from pcms.config import Settings, settings
from pcms.db.session import get_db
from pcms.schemas.pagination import UNPAGED


def get_settings() -> Settings:
    """Settings as a dependency, so tests can override them per app."""
    return settings


DB = Annotated[AsyncSession, Depends(get_db)]
AppSettings = Annotated[Settings, Depends(get_settings)]


@dataclass(frozen=True)
class PageParams:
    page_index: int
    page_size: int


def get_page_params(
    config: AppSettings,
    page_index: Annotated[int, Query(alias="pageIndex", ge=0)] = UNPAGED,
    page_size: Annotated[int | None, Query(alias="pageSize", ge=1)] = None,
) -> PageParams:
    """Read paging query parameters.

    pageIndex 0 (the default) returns every row as a single page. pageSize
    defaults to ``Settings.default_page_size`` and is clamped to
    ``Settings.max_page_size``; the pagination core itself has no upper bound.
    """
    size = page_size if page_size is not None else config.default_page_size
    return PageParams(page_index=page_index, page_size=min(size, config.max_page_size))


Page = Annotated[PageParams, Depends(get_page_params)]
