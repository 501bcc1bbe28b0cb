"""Statistics endpoints."""

from fastapi import APIRouter, Query, status

from booking.dependencies import DatabaseSession, Paging
from booking.schemas.statistics import StatisticsDetail, StatisticsMode, StatisticsSummary
from booking.services.statistics_service import StatisticsService, resolve_date_range

router = APIRouter()


@router.get(
    "/statistics",
    response_model=StatisticsSummary | StatisticsDetail,
    status_code=status.HTTP_200_OK,
    tags=["Statistics"],
    summary="Appointment statistics for a date range",
)
async def get_statistics(
    db: DatabaseSession,
    paging: Paging,
    start: str | None = Query(None, description="First day, inclusive"),
    end: str | None = Query(None, description="Last day, inclusive"),
    mode: StatisticsMode = Query(StatisticsMode.SUMMARY),
) -> StatisticsSummary | StatisticsDetail:
    """
    Summarize or list appointments between ``start`` and ``end``.

    Summary mode returns totals and grouped counts; detail mode returns a
    page of records ordered by date descending, then time ascending.

    Raises:
        ValidationException: If ``start`` or ``end`` is missing or malformed
    """
    start_date, end_date = resolve_date_range(start, end)

    service = StatisticsService(db)
    if mode == StatisticsMode.DETAIL:
        return await service.get_detail(start_date, end_date, paging.page, paging.page_size)
    return await service.get_summary(start_date, end_date)
