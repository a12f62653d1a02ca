from typing import Annotated

from fastapi import APIRouter, Depends, Path

from app.schemas import MAX_ID, BookDeviceBody, BookingOut, DeviceInfoOut
from app.service import DeviceService, get_device_service

router = APIRouter()

DeviceId = Annotated[int, Path(ge=1, le=MAX_ID)]

@router.get("/{device_id}", response_model=DeviceInfoOut)
def get_device(device_id: DeviceId, service: DeviceService = Depends(get_device_service)):
    """
    Device details with its latest booking and whether it can be booked now.
    404 if the device does not exist.
    """
    info = service.get_info(device_id).unwrap()
    return DeviceInfoOut.model_validate(info)

@router.put("/{device_id}/book", response_model=BookingOut)
def book_device(device_id: DeviceId, body: BookDeviceBody, service: DeviceService = Depends(get_device_service)):
    """
    Open a booking of the device for body.userId.
      - 404 if the device or the user does not exist
      - 400 if the device already has an open booking
    """
    booking = service.book_device(device_id, body.user_id).unwrap()
    return BookingOut.model_validate(booking)

@router.put("/{device_id}/return", response_model=BookingOut)
def return_device(device_id: DeviceId, service: DeviceService = Depends(get_device_service)):
    """
    Close the device's open booking. 400 if there is none to close,
    including for unknown device ids.
    """
    booking = service.return_device(device_id).unwrap()
    return BookingOut.model_validate(booking)
