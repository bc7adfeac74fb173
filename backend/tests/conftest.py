"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from api.deps import get_media_store, get_plan_store
from main import app
from repositories import MediaFileStore, PlanFileStore
from schemas.plan import (
    CeremonyDetails,
    Guest,
    MediaDimensions,
    MediaItem,
    PlusOne,
    ReceptionDetails,
    SeatAssignment,
    Table,
    TodoItem,
    WeddingContactInfo,
    WeddingPlan,
    WishlistItem,
)


@pytest.fixture(name="data_dir")
def data_dir_fixture(tmp_path):
    """App-data root that does not exist yet."""
    return tmp_path / "app-data"


@pytest.fixture(name="plan_store")
def plan_store_fixture(data_dir) -> PlanFileStore:
    return PlanFileStore(data_dir)


@pytest.fixture(name="media_store")
def media_store_fixture(data_dir) -> MediaFileStore:
    return MediaFileStore(data_dir)


@pytest.fixture(name="client")
def client_fixture(plan_store: PlanFileStore, media_store: MediaFileStore):
    """Test client wired to stores under a temporary app-data root."""
    app.dependency_overrides[get_plan_store] = lambda: plan_store
    app.dependency_overrides[get_media_store] = lambda: media_store
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="full_plan")
def full_plan_fixture() -> WeddingPlan:
    """A plan with every collection and optional section populated."""
    return WeddingPlan(
        couple_name1="Alex",
        couple_name2="Jordan",
        wedding_date="2026-06-20",
        budget=25000.5,
        todos=[
            TodoItem(id=1, text="Book venue", completed=True, cost=8000.0,
                     vendor_name="Lakeside Hall", completion_date="2026-01-10"),
            TodoItem(id=2, text="Order flowers", budget=1200.0, payment_status="deposit",
                     due_date="2026-05-01", vendor_email="bloom@example.com"),
        ],
        guests=[
            Guest(id="g1", name="Sam", email="sam@example.com", phone="555-0100",
                  rsvp_status="attending", meal_preference="vegetarian",
                  plus_ones=[PlusOne(id="p1", name="Riley", meal_preference="fish")]),
            Guest(id="g2", name="Casey", rsvp_status="declined", notes="abroad"),
        ],
        tables=[
            Table(id="t1", name="Family", capacity=8, assigned_guests=["g1", "p1"],
                  shape="rectangular", x=120.5, y=80.0,
                  seat_assignments=[
                      SeatAssignment(table_id="t1", seat_number=1, guest_id="g1", guest_name="Sam"),
                  ]),
        ],
        wishlist=[
            WishlistItem(id="w1", title="Stand mixer", price=299.99, currency="USD",
                         image_url="https://shop.example.com/mixer.jpg",
                         product_url="https://shop.example.com/mixer",
                         status="reserved", reserved_by="Sam", reserved_at="2026-02-01"),
        ],
        media=[
            MediaItem(id="m1", filename="photo1.png", original_name="IMG_0001.PNG",
                      type="image", category="ceremony", uploaded_at="2026-06-20T15:00:00Z",
                      uploaded_by="Riley", caption="First kiss", tags=["kiss", "ceremony"],
                      is_favorite=True, file_size=2048,
                      dimensions=MediaDimensions(width=4032, height=3024)),
            MediaItem(id="m2", filename="dance.mp4", type="video", category="party",
                      file_size=10_000_000, duration=42.5, thumbnail_path="media/dance.jpg"),
        ],
        ceremony=CeremonyDetails(venue="Old Chapel", city="Springfield", zip_code="12345",
                                 time="15:00", officiant="Pat"),
        reception=ReceptionDetails(venue="Lakeside Hall", end_time="23:00", cocktail_hour="17:00"),
        contact_info=WeddingContactInfo(couple_email="us@example.com", planner_name="Morgan"),
        dress_code="Black tie",
        theme="Garden",
        colors="sage, ivory",
        rsvp_deadline="2026-05-01",
        hashtag="#AlexAndJordan",
        ceremony_start_time="2026-06-20T15:00:00",
    )
