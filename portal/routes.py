"""
HTTP routes for the portal API.
"""

from __future__ import annotations

import logging
import secrets
import time
import uuid
from datetime import datetime, timedelta

from fastapi import APIRouter, Depends, File, Query, Request, UploadFile
from sqlalchemy.exc import IntegrityError
from starlette.concurrency import run_in_threadpool

from portal.config import Settings, get_settings
from portal.db import (
    DbClient,
    GuestRecord,
    GuestTokenRecord,
    OrderItemRecord,
    OrderRecord,
    to_iso,
)
from portal.dependencies import get_db, get_storage
from portal.errors import ApiError
from portal.hotel_context import get_hotel_context, validate_hotel, validate_token
from portal.schemas import (
    CheckInDataResponse,
    CreateGuestRequest,
    CreateGuestResponse,
    EnhanceStayOptionsResponse,
    GuestListItem,
    MinibarOrderRequest,
    MinibarOrderResponse,
    SaveSignatureRequest,
    SaveSignatureResponse,
    UploadResponse,
    UploadStatusResponse,
)
from portal.storage import StorageClient
from shared.tokens import TokenGenerationError, generate_unique_token
from shared.types import GuestStatus, IdType, TokenStatus

logger = logging.getLogger(__name__)

router = APIRouter()
admin_router = APIRouter()

# Check-in links keep working for a week after departure.
TOKEN_GRACE_PERIOD = timedelta(days=7)
UPLOAD_ROUTE = "/admin/api/upload"
DEFAULT_UPLOAD_EXTENSION = "jpg"


def _parse_date(value: str) -> datetime:
    return datetime.fromisoformat(value)


@router.get("/admin/guests", response_model=list[GuestListItem])
def list_guests(db: DbClient = Depends(get_db)):
    try:
        entries = db.list_guests()
    except Exception as exc:
        logger.exception("Error fetching guests")
        raise ApiError(500, "Failed to fetch guests") from exc
    return [entry.as_dict() for entry in entries]


@router.post("/admin/guests", response_model=CreateGuestResponse)
def create_guest(payload: CreateGuestRequest, db: DbClient = Depends(get_db)):
    if payload.missing_required():
        raise ApiError(400, "Missing required fields")
    try:
        id_type = IdType(payload.idType)
        status = GuestStatus(payload.status) if payload.status else GuestStatus.CONFIRMED
        date_of_birth = _parse_date(payload.dateOfBirth)
        check_in = _parse_date(payload.checkInDate)
        check_out = _parse_date(payload.checkOutDate)
    except ValueError as exc:
        raise ApiError(400, "Invalid guest details") from exc

    try:
        token = generate_unique_token(db.token_exists)
    except TokenGenerationError as exc:
        logger.error("Token generation exhausted for hotel_id=%s", payload.hotelId)
        raise ApiError(500, "Failed to generate unique token") from exc
    except Exception as exc:
        logger.exception("Error creating guest")
        raise ApiError(500, "Failed to create guest") from exc

    guest = GuestRecord(
        id=str(uuid.uuid4()),
        hotel_id=payload.hotelId,
        first_name=payload.firstName,
        last_name=payload.lastName,
        phone=payload.phone,
        email=payload.email or None,
        room_number=payload.roomNumber,
        date_of_birth=date_of_birth,
        nationality=payload.nationality,
        iqama=payload.idNumber if id_type == IdType.IQAMA else None,
        passport=payload.idNumber if id_type == IdType.PASSPORT else None,
        national_id=payload.idNumber if id_type == IdType.NATIONAL_ID else None,
        status=status.value,
    )
    guest_token = GuestTokenRecord(
        id=str(uuid.uuid4()),
        token=token,
        guest_id=guest.id,
        hotel_id=payload.hotelId,
        check_in_date=check_in,
        check_out_date=check_out,
        expires_at=check_out + TOKEN_GRACE_PERIOD,
        status=TokenStatus.ACTIVE.value,
    )
    try:
        guest, guest_token = db.create_guest_with_token(guest, guest_token)
    except IntegrityError as exc:
        logger.exception("Integrity error creating guest")
        message = str(exc.orig).lower()
        if "foreign key" in message:
            raise ApiError(500, "Invalid hotel ID or related data.") from exc
        if "unique" in message:
            raise ApiError(500, "A guest with this information already exists.") from exc
        raise ApiError(500, "Failed to create guest") from exc
    except Exception as exc:
        logger.exception("Error creating guest")
        raise ApiError(500, "Failed to create guest") from exc

    return {
        "success": True,
        "guest": {
            "id": guest.id,
            "firstName": guest.first_name,
            "lastName": guest.last_name,
        },
        "token": guest_token.token,
    }


@router.get("/admin/enhance-stay-options", response_model=EnhanceStayOptionsResponse)
def list_enhance_stay_options(
    hotel_id: str | None = Query(None, alias="hotelId"),
    db: DbClient = Depends(get_db),
):
    if not hotel_id:
        raise ApiError(400, "Hotel ID is required")
    try:
        options = db.list_enhance_stay_options(hotel_id)
    except Exception as exc:
        logger.exception("Error fetching enhance-stay options for hotel_id=%s", hotel_id)
        raise ApiError(500, "Failed to fetch enhance-stay options") from exc
    return {"options": [option.as_dict() for option in options]}


@router.get("/check-in-data/{token}", response_model=CheckInDataResponse)
def get_check_in_data(token: str, request: Request, db: DbClient = Depends(get_db)):
    context = get_hotel_context(request)
    if context is None:
        raise ApiError(404, "Check-in data not found")
    try:
        hotel = validate_hotel(db, context.subdomain)
        token_data = validate_token(db, token, hotel.id) if hotel else None
    except Exception as exc:
        logger.exception("Error fetching check-in data")
        raise ApiError(500, "Failed to fetch check-in data") from exc
    if hotel is None or token_data is None:
        raise ApiError(404, "Check-in data not found")

    guest = token_data.guest
    return {
        "hotel": {"id": hotel.id, "name": hotel.name, "subdomain": hotel.subdomain},
        "guest": {
            "firstName": guest.first_name if guest else "",
            "lastName": guest.last_name if guest else "",
            "phone": guest.phone if guest else "",
            "roomNumber": guest.room_number if guest else "",
        },
        "booking": token_data.booking.as_dict() if token_data.booking else None,
        "token": token,
    }


@router.post("/save-signature", response_model=SaveSignatureResponse)
def save_signature(payload: SaveSignatureRequest, db: DbClient = Depends(get_db)):
    if not payload.token or not payload.signatureDataUrl:
        raise ApiError(400, "Token and signature are required")
    try:
        booking = db.find_pending_booking(payload.token)
        if booking is None:
            raise ApiError(404, "Booking not found")
        db.save_booking_signature(booking.id, payload.signatureDataUrl)
    except ApiError:
        raise
    except Exception as exc:
        logger.exception("Error saving signature")
        raise ApiError(500, "Failed to save signature") from exc
    return {"success": True, "bookingId": booking.id}


@router.post("/minibar/order", response_model=MinibarOrderResponse, status_code=201)
def place_minibar_order(payload: MinibarOrderRequest, db: DbClient = Depends(get_db)):
    hotel_id = str(payload.hotelId)
    try:
        guest = db.find_checked_in_guest(hotel_id, payload.lastName, payload.roomNumber)
        if guest is None:
            raise ApiError(
                403,
                "Guest not found or not checked in. Please verify your last name and room number.",
            )

        requested = [(str(line.itemId), line.quantity) for line in payload.items]
        available = {
            item.id: item
            for item in db.list_minibar_items(hotel_id, [item_id for item_id, _ in requested])
        }
        for item_id, quantity in requested:
            item = available.get(item_id)
            if item is None:
                raise ApiError(400, f"Item {item_id} not found or not available")
            if item.stock_quantity < quantity:
                raise ApiError(400, f"Insufficient stock for {item.name}")

        order = OrderRecord(
            id=str(uuid.uuid4()),
            hotel_id=hotel_id,
            guest_id=guest.id,
            guest_last_name=payload.lastName,
            room_number=payload.roomNumber,
            notes=payload.notes or None,
            items=[
                OrderItemRecord(
                    minibar_item_id=item_id,
                    name_snapshot=available[item_id].name,
                    price_snapshot=available[item_id].price,
                    quantity=quantity,
                    line_total=float(available[item_id].price) * quantity,
                )
                for item_id, quantity in requested
            ],
        )
        order = db.create_minibar_order(order)
    except ApiError:
        raise
    except Exception as exc:
        logger.exception("Error placing minibar order")
        raise ApiError(500, "Failed to place order. Please try again.") from exc

    return {
        "id": order.id,
        "createdAt": to_iso(order.created_at),
        "message": "Order placed successfully",
    }


@admin_router.get(UPLOAD_ROUTE, response_model=UploadStatusResponse)
def upload_status():
    return {"ok": True, "route": UPLOAD_ROUTE}


def _upload_key(filename: str) -> str:
    ext = DEFAULT_UPLOAD_EXTENSION
    if "." in filename:
        ext = filename.rsplit(".", 1)[1].lower() or DEFAULT_UPLOAD_EXTENSION
    return f"uploads/{int(time.time() * 1000)}-{secrets.token_hex(5)}.{ext}"


@admin_router.post(UPLOAD_ROUTE, response_model=UploadResponse)
async def upload_image(
    file: UploadFile | None = File(None),
    settings: Settings = Depends(get_settings),
    storage: StorageClient = Depends(get_storage),
):
    if not settings.bucket_name:
        raise ApiError(500, "Missing BUCKET_NAME")
    if file is None:
        raise ApiError(400, "No file provided")

    key = _upload_key(file.filename or "")
    try:
        body = await file.read()
        await run_in_threadpool(
            storage.upload_bytes,
            key,
            body,
            file.content_type or "application/octet-stream",
        )
    except Exception as exc:
        logger.exception("Upload failed for key=%s", key)
        raise ApiError(500, "Upload failed") from exc

    url = storage.public_url(key)
    logger.info("Upload successful: url=%s key=%s", url, key)
    return {"url": url, "key": key}
