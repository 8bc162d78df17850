"""
Pydantic schemas for the portal API.

Field names follow the wire format the front end already uses, which is
camelCase everywhere except the admin guest listing.
"""

from __future__ import annotations

from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class GuestListItem(BaseModel):
    id: str
    first_name: str
    last_name: str
    room_number: str
    phone: str
    email: Optional[str]
    status: str
    created_at: Optional[str]
    token: Optional[str] = None
    check_in_date: Optional[str] = None
    check_out_date: Optional[str] = None


class CreateGuestRequest(BaseModel):
    # Everything is optional here so a missing field yields the route's own
    # "Missing required fields" message instead of a per-field error.
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    roomNumber: Optional[str] = None
    dateOfBirth: Optional[str] = None
    nationality: Optional[str] = None
    idType: Optional[str] = None
    idNumber: Optional[str] = None
    status: Optional[str] = None
    checkInDate: Optional[str] = None
    checkOutDate: Optional[str] = None
    hotelId: Optional[str] = None

    def missing_required(self) -> list[str]:
        required = (
            "firstName",
            "lastName",
            "phone",
            "roomNumber",
            "dateOfBirth",
            "nationality",
            "idType",
            "idNumber",
            "checkInDate",
            "checkOutDate",
            "hotelId",
        )
        return [name for name in required if not getattr(self, name)]


class CreatedGuest(BaseModel):
    id: str
    firstName: str
    lastName: str


class CreateGuestResponse(BaseModel):
    success: Literal[True] = True
    guest: CreatedGuest
    token: str


class EnhanceStayOption(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    category: Optional[str] = None
    price: float
    imageUrl: Optional[str] = None


class EnhanceStayOptionsResponse(BaseModel):
    options: list[EnhanceStayOption]


class CheckInHotel(BaseModel):
    id: str
    name: str
    subdomain: str


class CheckInGuest(BaseModel):
    firstName: str = ""
    lastName: str = ""
    phone: str = ""
    roomNumber: str = ""


class CheckInBooking(BaseModel):
    id: str
    roomType: Optional[str] = None
    roomNumber: str
    checkInDate: Optional[str] = None
    checkOutDate: Optional[str] = None
    numberOfGuests: int
    bookingReference: Optional[str] = None
    totalAmount: Optional[float] = None


class CheckInDataResponse(BaseModel):
    hotel: CheckInHotel
    guest: CheckInGuest
    booking: Optional[CheckInBooking] = None
    token: str


class SaveSignatureRequest(BaseModel):
    token: Optional[str] = None
    signatureDataUrl: Optional[str] = None


class SaveSignatureResponse(BaseModel):
    success: Literal[True] = True
    bookingId: str


class MinibarOrderItem(BaseModel):
    itemId: UUID
    quantity: int = Field(..., ge=1)


class MinibarOrderRequest(BaseModel):
    hotelId: UUID
    lastName: str
    roomNumber: str
    items: list[MinibarOrderItem]
    notes: Optional[str] = None

    @field_validator("lastName")
    @classmethod
    def _last_name_length(cls, value: str) -> str:
        if len(value) < 2:
            raise ValueError("Last name is required")
        return value

    @field_validator("roomNumber")
    @classmethod
    def _room_number_present(cls, value: str) -> str:
        if not value:
            raise ValueError("Room number is required")
        return value

    @field_validator("items")
    @classmethod
    def _items_present(cls, value: list[MinibarOrderItem]) -> list[MinibarOrderItem]:
        if not value:
            raise ValueError("At least one item is required")
        return value


class MinibarOrderResponse(BaseModel):
    id: str
    createdAt: str
    message: str = "Order placed successfully"


class UploadStatusResponse(BaseModel):
    ok: bool = True
    route: str


class UploadResponse(BaseModel):
    url: str
    key: str
