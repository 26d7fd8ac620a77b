"""
SQLAlchemy ORM Model Definitions

Defines all database table structures for the booking backend:
- roles / users / user_roles: Accounts and their roles
- hotels, hotel_room_types, hotel_dates: Hotel catalogue and availability
- packages, package_dates: Travel packages and their departure windows
- medias: Images/videos owned by exactly one hotel or package
- reservations, companions: Bookings and the travellers on them
- billing_addresses, payments: Payment records
- reviews: Hotel/agency reviews
- commodities, custom_commodities: Hotel amenities and extra services

Every table except user_roles carries an ``is_active`` flag. Rows are never
physically deleted; repositories flip the flag instead.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from viaggia.common.time import stay_nights, utc_now_naive


class Base(DeclarativeBase):
    """SQLAlchemy ORM Base Class"""
    pass


class SoftDeleteMixin:
    """
    Declares the ``is_active`` column.

    The column default only applies at INSERT time, so the constructor also
    sets it to make freshly built (unflushed) entities report ``True``.
    """

    is_active: Mapped[bool] = mapped_column(
        Boolean, default=True, nullable=False, index=True
    )

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault("is_active", True)
        super().__init__(**kwargs)


class Role(SoftDeleteMixin, Base):
    """
    Roles Table

    Seeded with CLIENT, SERVICE_PROVIDER, ATTENDANT and ADMIN.
    """
    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)

    user_roles: Mapped[list["UserRole"]] = relationship(
        "UserRole", back_populates="role"
    )


class User(SoftDeleteMixin, Base):
    """
    Users Table

    One table for every account kind; role-specific columns are nullable.
    """
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(150), nullable=False, unique=True)
    # Hash produced by the (excluded) auth layer; never the clear-text password
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(20), nullable=False, default="")
    # Brazilian individual taxpayer ID, CLIENT accounts only
    cpf: Mapped[Optional[str]] = mapped_column(String(14), nullable=True, unique=True)
    # SERVICE_PROVIDER accounts
    company_name: Mapped[Optional[str]] = mapped_column(String(150), nullable=True)
    company_legal_name: Mapped[Optional[str]] = mapped_column(String(150), nullable=True)
    # ATTENDANT accounts
    employer_company_name: Mapped[Optional[str]] = mapped_column(String(150), nullable=True)
    employee_id: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    avatar_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    google_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now_naive, nullable=False
    )

    user_roles: Mapped[list["UserRole"]] = relationship(
        "UserRole", back_populates="user", cascade="save-update, merge"
    )
    hotels: Mapped[list["Hotel"]] = relationship("Hotel", back_populates="owner")
    reservations: Mapped[list["Reservation"]] = relationship(
        "Reservation", back_populates="user"
    )

    @property
    def role_names(self) -> list[str]:
        """Names of the assigned roles (requires user_roles -> role to be loaded)."""
        return [ur.role.name for ur in self.user_roles]


class UserRole(Base):
    """
    User-Role association table

    Composite primary key; not soft-deletable.
    """
    __tablename__ = "user_roles"

    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), primary_key=True
    )
    role_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("roles.id"), primary_key=True
    )

    user: Mapped["User"] = relationship("User", back_populates="user_roles")
    role: Mapped["Role"] = relationship("Role", back_populates="user_roles")


class Hotel(SoftDeleteMixin, Base):
    """
    Hotels Table
    """
    __tablename__ = "hotels"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    # Brazilian company tax ID, unique per hotel
    cnpj: Mapped[str] = mapped_column(String(18), nullable=False, unique=True)
    street: Mapped[str] = mapped_column(String(100), nullable=False)
    city: Mapped[str] = mapped_column(String(50), nullable=False)
    state: Mapped[str] = mapped_column(String(50), nullable=False)
    zip_code: Mapped[str] = mapped_column(String(20), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    star_rating: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    check_in_time: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    check_out_time: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    contact_phone: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    contact_email: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    # Cached mean of active review ratings, see HotelRepository.refresh_average_rating
    average_rating: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    # Owning SERVICE_PROVIDER account
    user_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=True, index=True
    )

    __table_args__ = (
        CheckConstraint("star_rating BETWEEN 1 AND 5", name="ck_hotels_star_rating"),
    )

    owner: Mapped[Optional["User"]] = relationship("User", back_populates="hotels")
    room_types: Mapped[list["HotelRoomType"]] = relationship(
        "HotelRoomType", back_populates="hotel"
    )
    dates: Mapped[list["HotelDate"]] = relationship("HotelDate", back_populates="hotel")
    medias: Mapped[list["Media"]] = relationship("Media", back_populates="hotel")
    reviews: Mapped[list["Review"]] = relationship("Review", back_populates="hotel")
    packages: Mapped[list["Package"]] = relationship("Package", back_populates="hotel")
    commodities: Mapped[list["Commodity"]] = relationship(
        "Commodity", back_populates="hotel"
    )
    reservations: Mapped[list["Reservation"]] = relationship(
        "Reservation", back_populates="hotel"
    )


class HotelRoomType(SoftDeleteMixin, Base):
    """
    Hotel Room Types Table
    """
    __tablename__ = "hotel_room_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    hotel_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("hotels.id"), nullable=False, index=True
    )
    # e.g. SINGLE, DOUBLE, SUITE
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    bed_type: Mapped[str] = mapped_column(String(50), nullable=False)
    total_rooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        CheckConstraint("capacity BETWEEN 1 AND 10", name="ck_hotel_room_types_capacity"),
    )

    hotel: Mapped["Hotel"] = relationship("Hotel", back_populates="room_types")


class HotelDate(SoftDeleteMixin, Base):
    """
    Hotel Availability Windows Table
    """
    __tablename__ = "hotel_dates"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    hotel_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("hotels.id"), nullable=False, index=True
    )
    start_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    available_rooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        CheckConstraint("available_rooms >= 0", name="ck_hotel_dates_available_rooms"),
    )

    hotel: Mapped["Hotel"] = relationship("Hotel", back_populates="dates")


class Package(SoftDeleteMixin, Base):
    """
    Travel Packages Table
    """
    __tablename__ = "packages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    hotel_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("hotels.id"), nullable=True, index=True
    )
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    destination: Mapped[str] = mapped_column(String(150), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    base_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    # Closed packages are no longer sold but stay visible
    is_closed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    hotel: Mapped[Optional["Hotel"]] = relationship("Hotel", back_populates="packages")
    package_dates: Mapped[list["PackageDate"]] = relationship(
        "PackageDate", back_populates="package"
    )
    medias: Mapped[list["Media"]] = relationship("Media", back_populates="package")


class PackageDate(SoftDeleteMixin, Base):
    """
    Package Departure Windows Table
    """
    __tablename__ = "package_dates"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    package_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("packages.id", ondelete="CASCADE"), nullable=False, index=True
    )
    start_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    package: Mapped["Package"] = relationship("Package", back_populates="package_dates")


class Media(SoftDeleteMixin, Base):
    """
    Media Table

    Belongs to exactly one hotel or one package.
    """
    __tablename__ = "medias"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    media_url: Mapped[str] = mapped_column(String(500), nullable=False)
    # "image" or "video"
    media_type: Mapped[str] = mapped_column(String(20), nullable=False)
    package_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("packages.id", ondelete="CASCADE"), nullable=True, index=True
    )
    hotel_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("hotels.id"), nullable=True, index=True
    )

    __table_args__ = (
        CheckConstraint(
            "(package_id IS NOT NULL AND hotel_id IS NULL) "
            "OR (package_id IS NULL AND hotel_id IS NOT NULL)",
            name="ck_medias_one_owner",
        ),
    )

    package: Mapped[Optional["Package"]] = relationship("Package", back_populates="medias")
    hotel: Mapped[Optional["Hotel"]] = relationship("Hotel", back_populates="medias")


class Reservation(SoftDeleteMixin, Base):
    """
    Reservations Table

    Either a hotel stay (hotel_id + room_type_id) or a package booking (package_id).
    """
    __tablename__ = "reservations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True
    )
    package_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("packages.id"), nullable=True, index=True
    )
    room_type_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("hotel_room_types.id"), nullable=True
    )
    hotel_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("hotels.id"), nullable=True, index=True
    )
    start_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    total_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    number_of_guests: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    # Pending / Confirmed / Cancelled
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Pending")

    __table_args__ = (
        CheckConstraint(
            "number_of_guests BETWEEN 1 AND 10", name="ck_reservations_number_of_guests"
        ),
    )

    user: Mapped["User"] = relationship("User", back_populates="reservations")
    hotel: Mapped[Optional["Hotel"]] = relationship("Hotel", back_populates="reservations")
    package: Mapped[Optional["Package"]] = relationship("Package")
    room_type: Mapped[Optional["HotelRoomType"]] = relationship("HotelRoomType")
    companions: Mapped[list["Companion"]] = relationship(
        "Companion", back_populates="reservation"
    )
    payments: Mapped[list["Payment"]] = relationship(
        "Payment", back_populates="reservation"
    )

    @property
    def nights(self) -> int:
        return stay_nights(self.start_date, self.end_date)


class Companion(SoftDeleteMixin, Base):
    """
    Reservation Companions Table
    """
    __tablename__ = "companions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    reservation_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("reservations.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    cpf: Mapped[str] = mapped_column(String(20), nullable=False)
    birth_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    reservation: Mapped["Reservation"] = relationship(
        "Reservation", back_populates="companions"
    )


class BillingAddress(SoftDeleteMixin, Base):
    """
    Billing Addresses Table
    """
    __tablename__ = "billing_addresses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    street: Mapped[str] = mapped_column(String(100), nullable=False)
    city: Mapped[str] = mapped_column(String(50), nullable=False)
    state: Mapped[str] = mapped_column(String(50), nullable=False)
    zip_code: Mapped[str] = mapped_column(String(20), nullable=False)
    country: Mapped[str] = mapped_column(String(50), nullable=False, default="BR")


class Payment(SoftDeleteMixin, Base):
    """
    Payments Table

    Mirrors the state of a Stripe payment intent; the Stripe calls themselves
    live outside this package.
    """
    __tablename__ = "payments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True
    )
    reservation_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("reservations.id"), nullable=False, index=True
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    payment_date: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now_naive, nullable=False
    )
    # CreditCard / BankTransfer / Pix
    payment_method: Mapped[str] = mapped_column(String(50), nullable=False)
    # Pending / Completed / Failed / Refunded
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Pending")
    stripe_payment_intent_id: Mapped[Optional[str]] = mapped_column(
        String(100), nullable=True, index=True
    )
    failure_reason: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    refunded_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    billing_address_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("billing_addresses.id"), nullable=True
    )

    user: Mapped["User"] = relationship("User")
    reservation: Mapped["Reservation"] = relationship(
        "Reservation", back_populates="payments"
    )
    billing_address: Mapped[Optional["BillingAddress"]] = relationship("BillingAddress")


class Review(SoftDeleteMixin, Base):
    """
    Reviews Table
    """
    __tablename__ = "reviews"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True
    )
    # "Hotel" or "Agency"
    review_type: Mapped[str] = mapped_column(String(20), nullable=False, default="Hotel")
    hotel_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("hotels.id"), nullable=True, index=True
    )
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    comment: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now_naive, nullable=False
    )

    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_reviews_rating"),
    )

    user: Mapped["User"] = relationship("User")
    hotel: Mapped[Optional["Hotel"]] = relationship("Hotel", back_populates="reviews")


class Commodity(SoftDeleteMixin, Base):
    """
    Hotel Amenities Table

    Standard amenities as has/is_paid/price triples; anything else goes to
    custom_commodities.
    """
    __tablename__ = "commodities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    hotel_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("hotels.id", ondelete="CASCADE"), nullable=False, index=True
    )

    has_parking: Mapped[bool] = mapped_column(Boolean, default=False)
    is_parking_paid: Mapped[bool] = mapped_column(Boolean, default=False)
    parking_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=0)

    has_breakfast: Mapped[bool] = mapped_column(Boolean, default=False)
    is_breakfast_paid: Mapped[bool] = mapped_column(Boolean, default=False)
    breakfast_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=0)

    has_wifi: Mapped[bool] = mapped_column(Boolean, default=False)
    is_wifi_paid: Mapped[bool] = mapped_column(Boolean, default=False)
    wifi_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=0)

    has_pool: Mapped[bool] = mapped_column(Boolean, default=False)
    is_pool_paid: Mapped[bool] = mapped_column(Boolean, default=False)
    pool_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=0)

    has_gym: Mapped[bool] = mapped_column(Boolean, default=False)
    is_gym_paid: Mapped[bool] = mapped_column(Boolean, default=False)
    gym_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=0)

    has_spa: Mapped[bool] = mapped_column(Boolean, default=False)
    is_spa_paid: Mapped[bool] = mapped_column(Boolean, default=False)
    spa_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=0)

    is_pet_friendly: Mapped[bool] = mapped_column(Boolean, default=False)
    is_pet_friendly_paid: Mapped[bool] = mapped_column(Boolean, default=False)
    pet_friendly_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=0)

    hotel: Mapped["Hotel"] = relationship("Hotel", back_populates="commodities")
    custom_commodities: Mapped[list["CustomCommodity"]] = relationship(
        "CustomCommodity", back_populates="commodity"
    )


class CustomCommodity(SoftDeleteMixin, Base):
    """
    Custom Hotel Services Table

    Extra services attached to a hotel's amenity record (e.g. 24h room service).
    """
    __tablename__ = "custom_commodities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    commodity_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("commodities.id"), nullable=False, index=True
    )
    hotel_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("hotels.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    is_paid: Mapped[bool] = mapped_column(Boolean, default=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=0)
    description: Mapped[Optional[str]] = mapped_column(String(250), nullable=True)

    commodity: Mapped["Commodity"] = relationship(
        "Commodity", back_populates="custom_commodities"
    )
    hotel: Mapped["Hotel"] = relationship("Hotel")
