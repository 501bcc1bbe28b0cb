"""Tests for statistics endpoint."""

import math
from datetime import date

import pytest
import pytest_asyncio
from httpx import AsyncClient

STATS_URL = "/api/v1/statistics"


@pytest_asyncio.fixture
async def june_bookings(insert_appointment) -> None:
    """Seed a month of bookings plus some outside the range."""
    # In range
    await insert_appointment(user_name="张三", appointment_date=date(2024, 6, 1))
    await insert_appointment(
        user_name="张三", appointment_date=date(2024, 6, 1), appointment_time="10:00-10:30"
    )
    # Same slot booked twice
    await insert_appointment(user_name="李四", appointment_date=date(2024, 6, 1))
    await insert_appointment(
        user_name="李四", appointment_date=date(2024, 6, 15), appointment_time="14:00-14:30"
    )
    await insert_appointment(
        user_name="王五", appointment_date=date(2024, 6, 30), appointment_time="17:30-18:00"
    )
    # Out of range
    await insert_appointment(user_name="赵六", appointment_date=date(2024, 5, 31))
    await insert_appointment(user_name="赵六", appointment_date=date(2024, 7, 1))


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "params",
    [{}, {"start": "2024-06-01"}, {"end": "2024-06-30"}, {"start": "", "end": "2024-06-30"}],
)
async def test_missing_dates(client: AsyncClient, params: dict) -> None:
    """Test both bounds are required."""
    response = await client.get(STATS_URL, params=params)
    assert response.status_code == 400
    assert response.json()["error"] == "Missing date parameters"


@pytest.mark.asyncio
async def test_invalid_dates(client: AsyncClient) -> None:
    """Test unparseable bounds are rejected."""
    response = await client.get(STATS_URL, params={"start": "yesterday", "end": "2024-06-30"})
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid date format"


@pytest.mark.asyncio
async def test_invalid_mode(client: AsyncClient) -> None:
    """Test unknown modes are rejected."""
    response = await client.get(
        STATS_URL, params={"start": "2024-06-01", "end": "2024-06-30", "mode": "chart"}
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_summary(client: AsyncClient, june_bookings: None) -> None:
    """Test aggregate counts for an inclusive date range."""
    response = await client.get(STATS_URL, params={"start": "2024-06-01", "end": "2024-06-30"})
    assert response.status_code == 200
    data = response.json()

    assert data["totalAppointments"] == 5
    assert data["totalUsers"] == 3
    assert data["byDate"] == [
        {"date": "2024-06-01", "count": 3},
        {"date": "2024-06-15", "count": 1},
        {"date": "2024-06-30", "count": 1},
    ]
    assert data["byTimeSlot"][0] == {"timeSlot": "09:00-09:30", "count": 2}
    counts = [item["count"] for item in data["byTimeSlot"]]
    assert counts == sorted(counts, reverse=True)
    assert {tuple(item.values()) for item in data["byUser"][:2]} == {("张三", 2), ("李四", 2)}
    assert data["byUser"][2] == {"userName": "王五", "count": 1}


@pytest.mark.asyncio
async def test_summary_total_matches_by_date(client: AsyncClient, june_bookings: None) -> None:
    """Test the total equals the sum of the per-day counts."""
    ranges = [
        ("2024-05-01", "2024-07-31"),
        ("2024-06-01", "2024-06-01"),
        ("2024-06-02", "2024-06-29"),
    ]
    for start, end in ranges:
        response = await client.get(STATS_URL, params={"start": start, "end": end})
        data = response.json()
        assert data["totalAppointments"] == sum(item["count"] for item in data["byDate"])


@pytest.mark.asyncio
async def test_summary_empty_range(client: AsyncClient) -> None:
    """Test an empty range yields zero counts."""
    response = await client.get(STATS_URL, params={"start": "2024-06-01", "end": "2024-06-30"})
    assert response.json() == {
        "totalAppointments": 0,
        "totalUsers": 0,
        "byDate": [],
        "byTimeSlot": [],
        "byUser": [],
    }


@pytest.mark.asyncio
async def test_summary_limits_top_users(client: AsyncClient, insert_appointment) -> None:
    """Test only the ten busiest users are listed."""
    for i in range(12):
        for _ in range(i + 1):
            await insert_appointment(user_name=f"user-{i:02d}")

    response = await client.get(STATS_URL, params={"start": "2024-06-01", "end": "2024-06-01"})
    data = response.json()
    assert data["totalUsers"] == 12
    assert len(data["byUser"]) == 10
    assert data["byUser"][0] == {"userName": "user-11", "count": 12}
    assert data["byUser"][-1] == {"userName": "user-02", "count": 3}


@pytest.mark.asyncio
async def test_summary_accepts_datetime_bounds(client: AsyncClient, june_bookings: None) -> None:
    """Test ISO datetimes are reduced to their calendar date."""
    response = await client.get(
        STATS_URL, params={"start": "2024-06-01T12:00:00", "end": "2024-06-30T00:00:00"}
    )
    assert response.status_code == 200
    assert response.json()["totalAppointments"] == 5


@pytest.mark.asyncio
async def test_detail_page(client: AsyncClient, june_bookings: None) -> None:
    """Test detail mode returns at most pageSize records in order."""
    response = await client.get(
        STATS_URL,
        params={
            "start": "2024-06-01",
            "end": "2024-06-30",
            "mode": "detail",
            "page": 1,
            "pageSize": 5,
        },
    )
    assert response.status_code == 200
    data = response.json()
    records = data["records"]
    assert len(records) == 5
    assert [(r["appointment_date"], r["appointment_time"]) for r in records] == [
        ("2024-06-30", "17:30-18:00"),
        ("2024-06-15", "14:00-14:30"),
        ("2024-06-01", "09:00-09:30"),
        ("2024-06-01", "09:00-09:30"),
        ("2024-06-01", "10:00-10:30"),
    ]
    assert data["pagination"] == {"total": 5, "page": 1, "pageSize": 5, "totalPages": 1}


@pytest.mark.asyncio
async def test_detail_pagination(client: AsyncClient, june_bookings: None) -> None:
    """Test page metadata and pages past the end."""
    params = {"start": "2024-06-01", "end": "2024-06-30", "mode": "detail", "pageSize": 2}

    response = await client.get(STATS_URL, params={**params, "page": 3})
    data = response.json()
    assert len(data["records"]) == 1
    assert data["pagination"]["totalPages"] == math.ceil(5 / 2)

    response = await client.get(STATS_URL, params={**params, "page": 4})
    data = response.json()
    assert data["records"] == []
    assert data["pagination"] == {"total": 5, "page": 4, "pageSize": 2, "totalPages": 3}


@pytest.mark.asyncio
async def test_detail_empty_range(client: AsyncClient) -> None:
    """Test an empty range has zero pages."""
    response = await client.get(
        STATS_URL, params={"start": "2024-06-01", "end": "2024-06-30", "mode": "detail"}
    )
    data = response.json()
    assert data["records"] == []
    assert data["pagination"] == {"total": 0, "page": 1, "pageSize": 10, "totalPages": 0}


@pytest.mark.asyncio
async def test_detail_rejects_oversized_page(client: AsyncClient) -> None:
    """Test detail pages share the booking list's page size range."""
    response = await client.get(
        STATS_URL,
        params={"start": "2024-06-01", "end": "2024-06-30", "mode": "detail", "pageSize": 200},
    )
    assert response.status_code == 400
    assert response.json()["kind"] == "validation_error"


@pytest.mark.asyncio
async def test_detail_pages_cover_double_bookings_once(
    client: AsyncClient,
    insert_appointment,
) -> None:
    """Test paging one row at a time visits every same-slot booking exactly once."""
    inserted = {str((await insert_appointment(user_name=f"user-{i}")).id) for i in range(4)}

    seen = []
    for page in range(1, 5):
        response = await client.get(
            STATS_URL,
            params={
                "start": "2024-06-01",
                "end": "2024-06-01",
                "mode": "detail",
                "page": page,
                "pageSize": 1,
            },
        )
        seen.extend(record["id"] for record in response.json()["records"])

    assert len(seen) == 4
    assert set(seen) == inserted
    assert seen == sorted(seen)
