"""
Database abstraction for Postgres and an in-memory test implementation.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional, Protocol

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    create_engine,
    func,
    select,
)
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import NullPool

from shared.json_utils import KeyCase, convert_keys
from shared.types import BookingStatus, GuestStatus, HotelStatus, OrderStatus, TokenStatus

SUPABASE_POOLER_HOST = "pooler.supabase.com"


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


def to_iso(value: Optional[datetime]) -> Optional[str]:
    """Serialize a timestamp as UTC ISO-8601 with millisecond precision."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (
        value.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


@dataclass
class HotelRecord:
    id: str
    subdomain: str
    name: str
    status: str = HotelStatus.ACTIVE.value
    created_at: datetime = field(default_factory=_now)


@dataclass
class GuestRecord:
    id: str
    first_name: str
    last_name: str
    room_number: str
    phone: str
    email: Optional[str]
    status: str
    hotel_id: Optional[str] = None
    date_of_birth: Optional[datetime] = None
    nationality: Optional[str] = None
    iqama: Optional[str] = None
    passport: Optional[str] = None
    national_id: Optional[str] = None
    created_at: datetime = field(default_factory=_now)


@dataclass
class BookingRecord:
    id: str
    guest_id: str
    hotel_id: str
    room_number: str
    check_in_date: datetime
    check_out_date: datetime
    token_id: Optional[str] = None
    room_type: Optional[str] = None
    number_of_guests: int = 1
    booking_reference: Optional[str] = None
    total_amount: Optional[float] = None
    status: str = BookingStatus.PENDING.value
    signature_data_url: Optional[str] = None
    created_at: datetime = field(default_factory=_now)

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "roomType": self.room_type,
            "roomNumber": self.room_number,
            "checkInDate": to_iso(self.check_in_date),
            "checkOutDate": to_iso(self.check_out_date),
            "numberOfGuests": self.number_of_guests,
            "bookingReference": self.booking_reference,
            "totalAmount": (
                float(self.total_amount) if self.total_amount is not None else None
            ),
        }


@dataclass
class GuestTokenRecord:
    id: str
    token: str
    guest_id: str
    hotel_id: str
    check_in_date: datetime
    check_out_date: datetime
    expires_at: datetime
    status: str = TokenStatus.ACTIVE.value
    created_at: datetime = field(default_factory=_now)
    # Populated by lookups that join the owning guest and newest booking.
    guest: Optional[GuestRecord] = None
    booking: Optional[BookingRecord] = None


@dataclass
class GuestListEntry:
    """A guest together with their newest active check-in token, if any."""

    guest: GuestRecord
    token: Optional[GuestTokenRecord] = None

    def as_dict(self) -> dict:
        token = self.token
        return {
            "id": self.guest.id,
            "first_name": self.guest.first_name,
            "last_name": self.guest.last_name,
            "room_number": self.guest.room_number,
            "phone": self.guest.phone,
            "email": self.guest.email,
            "status": self.guest.status,
            "created_at": to_iso(self.guest.created_at),
            "token": token.token if token else None,
            "check_in_date": to_iso(token.check_in_date) if token else None,
            "check_out_date": to_iso(token.check_out_date) if token else None,
        }


@dataclass
class EnhanceStayOptionRecord:
    id: str
    hotel_id: str
    name: str
    description: Optional[str]
    category: Optional[str]
    price: float
    image_url: Optional[str] = None
    is_visible: bool = True
    display_order: int = 0

    def as_dict(self) -> dict:
        return convert_keys(
            {
                "id": self.id,
                "name": self.name,
                "description": self.description,
                "category": self.category,
                "price": float(self.price),
                "image_url": self.image_url,
            },
            KeyCase.CAMEL,
        )


@dataclass
class MinibarItemRecord:
    id: str
    hotel_id: str
    name: str
    price: float
    stock_quantity: int
    is_visible: bool = True


@dataclass
class OrderItemRecord:
    minibar_item_id: str
    name_snapshot: str
    price_snapshot: float
    quantity: int
    line_total: float
    order_id: Optional[str] = None


@dataclass
class OrderRecord:
    id: str
    hotel_id: str
    guest_id: str
    guest_last_name: str
    room_number: str
    source: str = "minibar"
    status: str = OrderStatus.PENDING.value
    notes: Optional[str] = None
    items: List[OrderItemRecord] = field(default_factory=list)
    created_at: datetime = field(default_factory=_now)


class DbClient(Protocol):
    """Interface for database access."""

    def list_guests(self) -> list[GuestListEntry]:
        ...

    def token_exists(self, token: str) -> bool:
        ...

    def create_guest_with_token(
        self, guest: GuestRecord, token: GuestTokenRecord
    ) -> tuple[GuestRecord, GuestTokenRecord]:
        ...

    def list_enhance_stay_options(self, hotel_id: str) -> list[EnhanceStayOptionRecord]:
        ...

    def get_active_hotel(self, subdomain: str) -> Optional[HotelRecord]:
        ...

    def count_hotels(self) -> int:
        ...

    def list_active_hotels(self) -> list[HotelRecord]:
        ...

    def find_active_token(self, token: str, hotel_id: str) -> Optional[GuestTokenRecord]:
        ...

    def update_token_status(self, token_id: str, status: TokenStatus) -> None:
        ...

    def find_pending_booking(self, token: str) -> Optional[BookingRecord]:
        ...

    def save_booking_signature(self, booking_id: str, signature_data_url: str) -> None:
        ...

    def find_checked_in_guest(
        self, hotel_id: str, last_name: str, room_number: str
    ) -> Optional[GuestRecord]:
        ...

    def list_minibar_items(
        self, hotel_id: str, item_ids: list[str]
    ) -> list[MinibarItemRecord]:
        ...

    def create_minibar_order(self, order: OrderRecord) -> OrderRecord:
        ...


class InMemoryDbClient:
    """Simple in-memory database for development and tests."""

    def __init__(self):
        self.hotels: Dict[str, HotelRecord] = {}
        self.guests: Dict[str, GuestRecord] = {}
        self.tokens: Dict[str, GuestTokenRecord] = {}
        self.bookings: Dict[str, BookingRecord] = {}
        self.options: Dict[str, EnhanceStayOptionRecord] = {}
        self.minibar_items: Dict[str, MinibarItemRecord] = {}
        self.orders: Dict[str, OrderRecord] = {}

    def reset(self) -> None:
        """Clear all stored data (useful in tests)."""
        self.hotels.clear()
        self.guests.clear()
        self.tokens.clear()
        self.bookings.clear()
        self.options.clear()
        self.minibar_items.clear()
        self.orders.clear()

    def _newest_active_token(self, guest_id: str) -> Optional[GuestTokenRecord]:
        active = [
            t
            for t in self.tokens.values()
            if t.guest_id == guest_id and t.status == TokenStatus.ACTIVE
        ]
        if not active:
            return None
        return max(active, key=lambda t: t.created_at)

    def list_guests(self) -> list[GuestListEntry]:
        guests = sorted(self.guests.values(), key=lambda g: g.created_at, reverse=True)
        return [GuestListEntry(g, self._newest_active_token(g.id)) for g in guests]

    def token_exists(self, token: str) -> bool:
        return any(t.token == token for t in self.tokens.values())

    def create_guest_with_token(
        self, guest: GuestRecord, token: GuestTokenRecord
    ) -> tuple[GuestRecord, GuestTokenRecord]:
        self.guests[guest.id] = guest
        self.tokens[token.id] = token
        return guest, token

    def list_enhance_stay_options(self, hotel_id: str) -> list[EnhanceStayOptionRecord]:
        options = [
            o for o in self.options.values() if o.hotel_id == hotel_id and o.is_visible
        ]
        return sorted(options, key=lambda o: (o.display_order, o.id))

    def get_active_hotel(self, subdomain: str) -> Optional[HotelRecord]:
        for hotel in self.hotels.values():
            if hotel.subdomain == subdomain and hotel.status == HotelStatus.ACTIVE:
                return hotel
        return None

    def count_hotels(self) -> int:
        return len(self.hotels)

    def list_active_hotels(self) -> list[HotelRecord]:
        return [h for h in self.hotels.values() if h.status == HotelStatus.ACTIVE]

    def _newest_booking(self, token_id: str, **filters) -> Optional[BookingRecord]:
        bookings = [
            b
            for b in self.bookings.values()
            if b.token_id == token_id
            and all(getattr(b, key) == value for key, value in filters.items())
        ]
        if not bookings:
            return None
        return max(bookings, key=lambda b: b.created_at)

    def find_active_token(self, token: str, hotel_id: str) -> Optional[GuestTokenRecord]:
        for record in self.tokens.values():
            if (
                record.token == token
                and record.hotel_id == hotel_id
                and record.status == TokenStatus.ACTIVE
            ):
                record.guest = self.guests.get(record.guest_id)
                record.booking = self._newest_booking(record.id, hotel_id=hotel_id)
                return record
        return None

    def update_token_status(self, token_id: str, status: TokenStatus) -> None:
        record = self.tokens.get(token_id)
        if record:
            record.status = status.value

    def find_pending_booking(self, token: str) -> Optional[BookingRecord]:
        for record in self.tokens.values():
            if record.token == token:
                return self._newest_booking(
                    record.id, status=BookingStatus.PENDING.value
                )
        return None

    def save_booking_signature(self, booking_id: str, signature_data_url: str) -> None:
        booking = self.bookings.get(booking_id)
        if booking:
            booking.signature_data_url = signature_data_url

    def find_checked_in_guest(
        self, hotel_id: str, last_name: str, room_number: str
    ) -> Optional[GuestRecord]:
        for guest in self.guests.values():
            if (
                guest.hotel_id == hotel_id
                and guest.last_name.lower() == last_name.lower()
                and guest.room_number == room_number
                and guest.status == GuestStatus.CHECKED_IN
            ):
                return guest
        return None

    def list_minibar_items(
        self, hotel_id: str, item_ids: list[str]
    ) -> list[MinibarItemRecord]:
        wanted = set(item_ids)
        return [
            item
            for item in self.minibar_items.values()
            if item.id in wanted and item.hotel_id == hotel_id and item.is_visible
        ]

    def create_minibar_order(self, order: OrderRecord) -> OrderRecord:
        for line in order.items:
            line.order_id = order.id
            self.minibar_items[line.minibar_item_id].stock_quantity -= line.quantity
        self.orders[order.id] = order
        return order


class SqlDbClient:
    """
    SQLAlchemy-backed implementation. Accepts any SQLAlchemy URL (e.g., Postgres or SQLite for tests).
    """

    def __init__(self, database_url: str, *, production: bool = False):
        if not database_url:
            raise ValueError("DATABASE_URL is required for SqlDbClient")
        engine_kwargs: dict = {"future": True, "pool_pre_ping": True}
        if SUPABASE_POOLER_HOST in database_url:
            # The transaction pooler multiplexes connections itself.
            engine_kwargs["poolclass"] = NullPool
        else:
            engine_kwargs["pool_recycle"] = 1800
        self.engine = create_engine(database_url, **engine_kwargs)
        logging.getLogger("sqlalchemy.engine").setLevel(
            logging.ERROR if production else logging.WARNING
        )
        self.Session = sessionmaker(
            bind=self.engine, class_=Session, expire_on_commit=False, future=True
        )
        Base.metadata.create_all(self.engine)

    @staticmethod
    def _to_guest(row: "GuestRow") -> GuestRecord:
        return GuestRecord(
            id=row.id,
            first_name=row.first_name,
            last_name=row.last_name,
            room_number=row.room_number,
            phone=row.phone,
            email=row.email,
            status=row.status,
            hotel_id=row.hotel_id,
            date_of_birth=row.date_of_birth,
            nationality=row.nationality,
            iqama=row.iqama,
            passport=row.passport,
            national_id=row.national_id,
            created_at=row.created_at,
        )

    @staticmethod
    def _to_token(row: "GuestTokenRow") -> GuestTokenRecord:
        return GuestTokenRecord(
            id=row.id,
            token=row.token,
            guest_id=row.guest_id,
            hotel_id=row.hotel_id,
            check_in_date=row.check_in_date,
            check_out_date=row.check_out_date,
            expires_at=row.expires_at,
            status=row.status,
            created_at=row.created_at,
        )

    @staticmethod
    def _to_booking(row: "BookingRow") -> BookingRecord:
        return BookingRecord(
            id=row.id,
            guest_id=row.guest_id,
            hotel_id=row.hotel_id,
            token_id=row.token_id,
            room_number=row.room_number,
            room_type=row.room_type,
            check_in_date=row.check_in_date,
            check_out_date=row.check_out_date,
            number_of_guests=row.number_of_guests,
            booking_reference=row.booking_reference,
            total_amount=row.total_amount,
            status=row.status,
            signature_data_url=row.signature_data_url,
            created_at=row.created_at,
        )

    @staticmethod
    def _to_hotel(row: "HotelRow") -> HotelRecord:
        return HotelRecord(
            id=row.id,
            subdomain=row.subdomain,
            name=row.name,
            status=row.status,
            created_at=row.created_at,
        )

    def list_guests(self) -> list[GuestListEntry]:
        with self.Session() as session:
            guests = (
                session.execute(select(GuestRow).order_by(GuestRow.created_at.desc()))
                .scalars()
                .all()
            )
            newest_tokens: dict[str, GuestTokenRecord] = {}
            if guests:
                token_rows = (
                    session.execute(
                        select(GuestTokenRow)
                        .where(
                            GuestTokenRow.guest_id.in_([g.id for g in guests]),
                            GuestTokenRow.status == TokenStatus.ACTIVE.value,
                        )
                        .order_by(GuestTokenRow.created_at.desc())
                    )
                    .scalars()
                    .all()
                )
                for row in token_rows:
                    newest_tokens.setdefault(row.guest_id, self._to_token(row))
            return [
                GuestListEntry(self._to_guest(g), newest_tokens.get(g.id))
                for g in guests
            ]

    def token_exists(self, token: str) -> bool:
        with self.Session() as session:
            stmt = select(GuestTokenRow.id).where(GuestTokenRow.token == token)
            return session.execute(stmt).first() is not None

    def create_guest_with_token(
        self, guest: GuestRecord, token: GuestTokenRecord
    ) -> tuple[GuestRecord, GuestTokenRecord]:
        with self.Session() as session, session.begin():
            session.add(
                GuestRow(
                    id=guest.id,
                    hotel_id=guest.hotel_id,
                    first_name=guest.first_name,
                    last_name=guest.last_name,
                    room_number=guest.room_number,
                    phone=guest.phone,
                    email=guest.email,
                    date_of_birth=guest.date_of_birth,
                    nationality=guest.nationality,
                    iqama=guest.iqama,
                    passport=guest.passport,
                    national_id=guest.national_id,
                    status=guest.status,
                    created_at=guest.created_at,
                )
            )
            # Flush the guest first so the token's foreign key resolves.
            session.flush()
            session.add(
                GuestTokenRow(
                    id=token.id,
                    token=token.token,
                    guest_id=token.guest_id,
                    hotel_id=token.hotel_id,
                    check_in_date=token.check_in_date,
                    check_out_date=token.check_out_date,
                    expires_at=token.expires_at,
                    status=token.status,
                    created_at=token.created_at,
                )
            )
        return guest, token

    def list_enhance_stay_options(self, hotel_id: str) -> list[EnhanceStayOptionRecord]:
        with self.Session() as session:
            stmt = (
                select(EnhanceStayOptionRow)
                .where(
                    EnhanceStayOptionRow.hotel_id == hotel_id,
                    EnhanceStayOptionRow.is_visible.is_(True),
                )
                .order_by(
                    EnhanceStayOptionRow.display_order.asc(),
                    EnhanceStayOptionRow.id.asc(),
                )
            )
            return [
                EnhanceStayOptionRecord(
                    id=row.id,
                    hotel_id=row.hotel_id,
                    name=row.name,
                    description=row.description,
                    category=row.category,
                    price=row.price,
                    image_url=row.image_url,
                    is_visible=row.is_visible,
                    display_order=row.display_order,
                )
                for row in session.execute(stmt).scalars()
            ]

    def get_active_hotel(self, subdomain: str) -> Optional[HotelRecord]:
        with self.Session() as session:
            stmt = select(HotelRow).where(
                HotelRow.subdomain == subdomain,
                HotelRow.status == HotelStatus.ACTIVE.value,
            )
            row = session.execute(stmt).scalars().first()
            return self._to_hotel(row) if row else None

    def count_hotels(self) -> int:
        with self.Session() as session:
            return session.execute(select(func.count(HotelRow.id))).scalar_one()

    def list_active_hotels(self) -> list[HotelRecord]:
        with self.Session() as session:
            stmt = select(HotelRow).where(HotelRow.status == HotelStatus.ACTIVE.value)
            return [self._to_hotel(row) for row in session.execute(stmt).scalars()]

    def find_active_token(self, token: str, hotel_id: str) -> Optional[GuestTokenRecord]:
        with self.Session() as session:
            row = (
                session.execute(
                    select(GuestTokenRow).where(
                        GuestTokenRow.token == token,
                        GuestTokenRow.hotel_id == hotel_id,
                        GuestTokenRow.status == TokenStatus.ACTIVE.value,
                    )
                )
                .scalars()
                .first()
            )
            if not row:
                return None
            record = self._to_token(row)
            guest = session.get(GuestRow, row.guest_id)
            record.guest = self._to_guest(guest) if guest else None
            booking = (
                session.execute(
                    select(BookingRow)
                    .where(BookingRow.token_id == row.id, BookingRow.hotel_id == hotel_id)
                    .order_by(BookingRow.created_at.desc())
                    .limit(1)
                )
                .scalars()
                .first()
            )
            record.booking = self._to_booking(booking) if booking else None
            return record

    def update_token_status(self, token_id: str, status: TokenStatus) -> None:
        with self.Session() as session:
            row = session.get(GuestTokenRow, token_id)
            if not row:
                return
            row.status = status.value
            session.commit()

    def find_pending_booking(self, token: str) -> Optional[BookingRecord]:
        with self.Session() as session:
            stmt = (
                select(BookingRow)
                .join(GuestTokenRow, BookingRow.token_id == GuestTokenRow.id)
                .where(
                    GuestTokenRow.token == token,
                    BookingRow.status == BookingStatus.PENDING.value,
                )
                .order_by(BookingRow.created_at.desc())
                .limit(1)
            )
            row = session.execute(stmt).scalars().first()
            return self._to_booking(row) if row else None

    def save_booking_signature(self, booking_id: str, signature_data_url: str) -> None:
        with self.Session() as session:
            row = session.get(BookingRow, booking_id)
            if not row:
                return
            row.signature_data_url = signature_data_url
            row.updated_at = _now()
            session.commit()

    def find_checked_in_guest(
        self, hotel_id: str, last_name: str, room_number: str
    ) -> Optional[GuestRecord]:
        with self.Session() as session:
            stmt = select(GuestRow).where(
                GuestRow.hotel_id == hotel_id,
                func.lower(GuestRow.last_name) == last_name.lower(),
                GuestRow.room_number == room_number,
                GuestRow.status == GuestStatus.CHECKED_IN.value,
            )
            row = session.execute(stmt).scalars().first()
            return self._to_guest(row) if row else None

    def list_minibar_items(
        self, hotel_id: str, item_ids: list[str]
    ) -> list[MinibarItemRecord]:
        with self.Session() as session:
            stmt = select(MinibarItemRow).where(
                MinibarItemRow.id.in_(item_ids),
                MinibarItemRow.hotel_id == hotel_id,
                MinibarItemRow.is_visible.is_(True),
            )
            return [
                MinibarItemRecord(
                    id=row.id,
                    hotel_id=row.hotel_id,
                    name=row.name,
                    price=row.price,
                    stock_quantity=row.stock_quantity,
                    is_visible=row.is_visible,
                )
                for row in session.execute(stmt).scalars()
            ]

    def create_minibar_order(self, order: OrderRecord) -> OrderRecord:
        with self.Session() as session, session.begin():
            session.add(
                OrderRow(
                    id=order.id,
                    hotel_id=order.hotel_id,
                    guest_id=order.guest_id,
                    guest_last_name=order.guest_last_name,
                    room_number=order.room_number,
                    source=order.source,
                    status=order.status,
                    notes=order.notes,
                    created_at=order.created_at,
                )
            )
            session.flush()
            for line in order.items:
                line.order_id = order.id
                session.add(
                    OrderItemRow(
                        id=_new_id(),
                        order_id=order.id,
                        minibar_item_id=line.minibar_item_id,
                        name_snapshot=line.name_snapshot,
                        price_snapshot=line.price_snapshot,
                        quantity=line.quantity,
                        line_total=line.line_total,
                    )
                )
                item = session.get(MinibarItemRow, line.minibar_item_id)
                item.stock_quantity -= line.quantity
        return order


Base = declarative_base()


class HotelRow(Base):
    __tablename__ = "hotels"

    id = Column(String, primary_key=True, default=_new_id)
    subdomain = Column(String, nullable=False, unique=True)
    name = Column(String, nullable=False)
    logo_url = Column(String, nullable=True)
    status = Column(String, nullable=False, default=HotelStatus.ACTIVE.value)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_now, onupdate=_now)


class GuestRow(Base):
    __tablename__ = "guests"

    id = Column(String, primary_key=True, default=_new_id)
    hotel_id = Column(String, ForeignKey("hotels.id"), nullable=True, index=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    room_number = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    email = Column(String, nullable=True)
    date_of_birth = Column(DateTime(timezone=True), nullable=True)
    nationality = Column(String, nullable=True)
    iqama = Column(String, nullable=True)
    passport = Column(String, nullable=True)
    national_id = Column(String, nullable=True)
    status = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_now, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_now, onupdate=_now)


class GuestTokenRow(Base):
    __tablename__ = "guest_tokens"

    id = Column(String, primary_key=True, default=_new_id)
    token = Column(String, nullable=False, unique=True)
    guest_id = Column(String, ForeignKey("guests.id"), nullable=False, index=True)
    hotel_id = Column(String, ForeignKey("hotels.id"), nullable=False, index=True)
    check_in_date = Column(DateTime(timezone=True), nullable=False)
    check_out_date = Column(DateTime(timezone=True), nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    status = Column(String, nullable=False, default=TokenStatus.ACTIVE.value)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_now)
    used_at = Column(DateTime(timezone=True), nullable=True)


class BookingRow(Base):
    __tablename__ = "bookings"

    id = Column(String, primary_key=True, default=_new_id)
    guest_id = Column(String, ForeignKey("guests.id"), nullable=False, index=True)
    hotel_id = Column(String, ForeignKey("hotels.id"), nullable=False, index=True)
    token_id = Column(String, ForeignKey("guest_tokens.id"), nullable=True, index=True)
    room_number = Column(String, nullable=False)
    room_type = Column(String, nullable=True)
    check_in_date = Column(DateTime(timezone=True), nullable=False)
    check_out_date = Column(DateTime(timezone=True), nullable=False)
    number_of_guests = Column(Integer, nullable=False, default=1)
    booking_reference = Column(String, nullable=True)
    total_amount = Column(Float, nullable=True)
    status = Column(String, nullable=False, default=BookingStatus.PENDING.value)
    signature_data_url = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_now, onupdate=_now)


class EnhanceStayOptionRow(Base):
    __tablename__ = "enhance_stay_options"

    id = Column(String, primary_key=True, default=_new_id)
    hotel_id = Column(String, ForeignKey("hotels.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String, nullable=True)
    price = Column(Float, nullable=False, default=0.0)
    image_url = Column(String, nullable=True)
    is_visible = Column(Boolean, nullable=False, default=True)
    display_order = Column(Integer, nullable=False, default=0)


class MinibarItemRow(Base):
    __tablename__ = "minibar_items"

    id = Column(String, primary_key=True, default=_new_id)
    hotel_id = Column(String, ForeignKey("hotels.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    price = Column(Float, nullable=False)
    stock_quantity = Column(Integer, nullable=False, default=0)
    is_visible = Column(Boolean, nullable=False, default=True)


class OrderRow(Base):
    __tablename__ = "orders"

    id = Column(String, primary_key=True, default=_new_id)
    hotel_id = Column(String, ForeignKey("hotels.id"), nullable=False, index=True)
    guest_id = Column(String, ForeignKey("guests.id"), nullable=False)
    guest_last_name = Column(String, nullable=False)
    room_number = Column(String, nullable=False)
    source = Column(String, nullable=False)
    status = Column(String, nullable=False, default=OrderStatus.PENDING.value)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_now)


class OrderItemRow(Base):
    __tablename__ = "order_items"

    id = Column(String, primary_key=True, default=_new_id)
    order_id = Column(String, ForeignKey("orders.id"), nullable=False, index=True)
    minibar_item_id = Column(String, ForeignKey("minibar_items.id"), nullable=False)
    name_snapshot = Column(String, nullable=False)
    price_snapshot = Column(Float, nullable=False)
    quantity = Column(Integer, nullable=False)
    line_total = Column(Float, nullable=False)
