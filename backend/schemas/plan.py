"""
WeddingPlan document schema.

Attribute names are snake_case; the document on disk (and the UI) uses the
camelCase alias of every field. Earlier revisions of the app wrote most keys in
snake_case, which still validate because models populate by name as well.

Every field added after the first revision carries a default so that an older
document loads with the gaps filled in instead of failing.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class PlanModel(BaseModel):
    """Base for every document type: camelCase on the wire, unknown keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_document(self) -> dict:
        """JSON-ready dict with wire names; absent optionals are left out."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ── Enumerations ───────────────────────────────────────────────────────

class RSVPStatus(str, Enum):
    PENDING = "pending"
    ATTENDING = "attending"
    DECLINED = "declined"


class TableShape(str, Enum):
    ROUND = "round"
    RECTANGULAR = "rectangular"


class WishlistStatus(str, Enum):
    AVAILABLE = "available"
    RESERVED = "reserved"
    PURCHASED = "purchased"


class MediaType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"


class MediaCategory(str, Enum):
    CEREMONY = "ceremony"
    RECEPTION = "reception"
    PREPARATION = "preparation"
    PORTRAITS = "portraits"
    PARTY = "party"
    CANDID = "candid"
    OTHER = "other"


# ── To-dos ─────────────────────────────────────────────────────────────

class TodoItem(PlanModel):
    """A planning task, optionally tied to a vendor and a cost."""

    id: int
    text: str = ""
    completed: bool = False
    cost: Optional[float] = None
    budget: Optional[float] = None
    payment_status: Optional[str] = None
    due_date: Optional[str] = None
    vendor_name: Optional[str] = None
    vendor_contact: Optional[str] = None
    vendor_email: Optional[str] = None
    vendor_phone: Optional[str] = None
    notes: Optional[str] = None
    completion_date: Optional[str] = None


# ── Guests ─────────────────────────────────────────────────────────────

class PlusOne(PlanModel):
    id: str
    name: str = ""
    meal_preference: str = ""
    notes: str = ""


class Guest(PlanModel):
    id: str
    name: str = ""
    email: str = ""
    phone: str = ""
    rsvp_status: RSVPStatus = RSVPStatus.PENDING
    meal_preference: str = ""
    plus_ones: list[PlusOne] = Field(default_factory=list)
    notes: str = ""


# ── Seating ────────────────────────────────────────────────────────────

class SeatAssignment(PlanModel):
    table_id: str
    seat_number: int
    guest_id: str
    guest_name: str = ""


class Table(PlanModel):
    """A reception table; x/y place it on the seating canvas."""

    id: str
    name: str = ""
    capacity: int = 0
    assigned_guests: list[str] = Field(default_factory=list)
    shape: TableShape = TableShape.ROUND
    x: Optional[float] = None
    y: Optional[float] = None
    seat_assignments: Optional[list[SeatAssignment]] = None


# ── Wishlist ───────────────────────────────────────────────────────────

class WishlistItem(PlanModel):
    id: str
    title: str = ""
    price: float = 0.0
    currency: str = ""
    image_url: str = ""
    product_url: str = ""
    status: WishlistStatus = WishlistStatus.AVAILABLE
    reserved_by: Optional[str] = None
    reserved_at: Optional[str] = None
    notes: Optional[str] = None


# ── Media gallery ──────────────────────────────────────────────────────

class MediaDimensions(PlanModel):
    width: int
    height: int


class MediaItem(PlanModel):
    """
    Metadata for one uploaded photo or video.

    `filename` names the backing file inside the media directory. Nothing keeps
    the two in sync: removing this record leaves the file, and deleting the file
    leaves the record.
    """

    id: str
    filename: str
    original_name: str = ""
    type: MediaType = MediaType.IMAGE
    category: MediaCategory = MediaCategory.OTHER
    uploaded_at: str = ""
    uploaded_by: str = ""
    caption: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    is_favorite: bool = False
    file_size: int = Field(default=0, ge=0)
    dimensions: Optional[MediaDimensions] = None
    duration: Optional[float] = None
    thumbnail_path: Optional[str] = None

    @field_validator("tags")
    @classmethod
    def _unique_tags(cls, tags: list[str]) -> list[str]:
        return list(dict.fromkeys(tags))


# ── Event details ──────────────────────────────────────────────────────

class CeremonyDetails(PlanModel):
    venue: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    time: Optional[str] = None
    duration: Optional[str] = None
    officiant: Optional[str] = None


class ReceptionDetails(PlanModel):
    venue: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    time: Optional[str] = None
    end_time: Optional[str] = None
    cocktail_hour: Optional[str] = None
    dinner_time: Optional[str] = None
    dancing_time: Optional[str] = None


class WeddingContactInfo(PlanModel):
    couple_email: Optional[str] = None
    couple_phone: Optional[str] = None
    planner_name: Optional[str] = None
    planner_email: Optional[str] = None
    planner_phone: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None


# ── Root document ──────────────────────────────────────────────────────

class WeddingPlan(PlanModel):
    """
    The single plan document of an installation.

    `WeddingPlan()` is the all-defaults document returned when nothing has been
    saved yet.
    """

    couple_name1: str = ""
    couple_name2: str = ""
    wedding_date: str = ""
    budget: float = 0.0
    todos: list[TodoItem] = Field(default_factory=list)
    guests: list[Guest] = Field(default_factory=list)
    tables: list[Table] = Field(default_factory=list)
    wishlist: list[WishlistItem] = Field(default_factory=list)
    media: list[MediaItem] = Field(default_factory=list)

    ceremony: Optional[CeremonyDetails] = None
    reception: Optional[ReceptionDetails] = None
    contact_info: Optional[WeddingContactInfo] = None

    dress_code: Optional[str] = None
    theme: Optional[str] = None
    colors: Optional[str] = None
    rsvp_deadline: Optional[str] = None
    gift_message: Optional[str] = None
    special_instructions: Optional[str] = None
    parking: Optional[str] = None
    transportation: Optional[str] = None
    accommodation: Optional[str] = None
    weather_plan: Optional[str] = None
    website: Optional[str] = None
    hashtag: Optional[str] = None
    ceremony_start_time: Optional[str] = None
    reception_start_time: Optional[str] = None
    reception_end_time: Optional[str] = None
