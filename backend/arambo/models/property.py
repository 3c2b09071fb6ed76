from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Optional

from sqlalchemy import JSON, Boolean, DateTime, Float, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from arambo.database import Base, new_id, utcnow


class Category(StrEnum):
    FURNISHED = "Furnished"
    SEMI_FURNISHED = "Semi-Furnished"
    NON_FURNISHED = "Non-Furnished"


class ListingType(StrEnum):
    FOR_RENT = "For Rent"
    FOR_SALE = "For Sale"


class PropertyType(StrEnum):
    APARTMENT = "apartment"
    HOUSE = "house"
    VILLA = "villa"


class InventoryStatus(StrEnum):
    LOOKING_FOR_RENT = "Looking for Rent"
    LOOKING_FOR_SALE = "Looking for Sale"
    LOOKING_FOR_LEASE = "Looking for Lease"
    AVAILABLE = "Available"
    RENTED = "Rented"
    SOLD = "Sold"
    LEASED = "Leased"
    UNAVAILABLE = "Unavailable"


class TenantType(StrEnum):
    FAMILY = "Family"
    BACHELOR = "Bachelor"
    OFFICE = "Office"
    COMMERCIAL = "Commercial"
    ANY = "Any"


class PropertyCategory(StrEnum):
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"


class FurnishingStatus(StrEnum):
    FURNISHED = "Furnished"
    SEMI_FURNISHED = "Semi-Furnished"
    NON_FURNISHED = "Non-Furnished"


class Property(Base):
    """A property listing. Hidden from default queries until confirmed."""

    __tablename__ = "properties"
    __table_args__ = (
        Index("ix_properties_listing_type_category", "listing_type", "category"),
        Index("ix_properties_bedrooms_size", "bedrooms", "size"),
        Index("ix_properties_area_property_category", "area", "property_category"),
        Index("ix_properties_inventory_tenant", "inventory_status", "tenant_type"),
        Index("ix_properties_rent_bedrooms", "rent", "bedrooms"),
    )

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)

    # Contact
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    phone: Mapped[str] = mapped_column(String(15), nullable=False, index=True)

    # Listing
    property_name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    listing_type: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    property_type: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    apartment_type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    size: Mapped[float] = mapped_column(Float, nullable=False)
    location: Mapped[str] = mapped_column(String(300), nullable=False, index=True)
    bedrooms: Mapped[int] = mapped_column(Integer, nullable=False)
    bathroom: Mapped[int] = mapped_column(Integer, nullable=False)
    baranda: Mapped[Optional[int]] = mapped_column(Integer, default=0)
    category: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, default="")

    # Status flags
    first_owner: Mapped[bool] = mapped_column(Boolean, default=False, index=True)
    paperwork_updated: Mapped[bool] = mapped_column(Boolean, default=False)
    on_loan: Mapped[bool] = mapped_column(Boolean, default=False, index=True)
    lift: Mapped[bool] = mapped_column(Boolean, default=False)
    is_confirmed: Mapped[bool] = mapped_column(Boolean, default=False, index=True)
    is_verified: Mapped[bool] = mapped_column(Boolean, default=False, index=True)

    # Address and identifiers
    house_id: Mapped[Optional[str]] = mapped_column(String(50), nullable=True, index=True)
    street_address: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    landmark: Mapped[Optional[str]] = mapped_column(String(300), nullable=True)
    area: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    listing_id: Mapped[Optional[str]] = mapped_column(String(50), nullable=True, index=True)
    latitude: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    longitude: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    # Tenancy
    inventory_status: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    tenant_type: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    property_category: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    furnishing_status: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    available_from: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    # Building
    floor: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    total_floor: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    year_of_construction: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # Money
    rent: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    service_charge: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    advance_months: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # Scores (1-10)
    clean_hygiene_score: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    sunlight_score: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    bathroom_conditions_score: Mapped[Optional[int]] = mapped_column(
        Integer, nullable=True
    )

    # Facilities
    cctv: Mapped[bool] = mapped_column(Boolean, default=False)
    community_hall: Mapped[bool] = mapped_column(Boolean, default=False)
    gym: Mapped[bool] = mapped_column(Boolean, default=False)
    masjid: Mapped[bool] = mapped_column(Boolean, default=False)
    parking: Mapped[bool] = mapped_column(Boolean, default=False)
    pets_allowed: Mapped[bool] = mapped_column(Boolean, default=False)
    swimming_pool: Mapped[bool] = mapped_column(Boolean, default=False)
    trained_guard: Mapped[bool] = mapped_column(Boolean, default=False)

    # Images
    cover_image: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    other_images: Mapped[Optional[list[str]]] = mapped_column(JSON, nullable=True)

    revision: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )
