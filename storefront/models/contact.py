"""Contact and booking models for the storefront"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel


class ServiceRequestType(str, Enum):
    EV_REPAIR = "ev-repair"
    MODULE_REPAIR = "module-repair"
    VFD = "vfd"
    TRAINING = "training"

    @property
    def label(self) -> str:
        return SERVICE_REQUEST_LABELS[self]


SERVICE_REQUEST_LABELS = {
    ServiceRequestType.EV_REPAIR: "EV Car Repair",
    ServiceRequestType.MODULE_REPAIR: "ECM / BCM Repair",
    ServiceRequestType.VFD: "Industrial VFD Repair",
    ServiceRequestType.TRAINING: "Training / Enrollment",
}


class Enquiry(BaseModel):
    """Service request or booking sent from the contact page"""
    enquiry_id: str
    name: str
    email: str
    phone: str
    service: ServiceRequestType
    details: str = ""
    created_at: datetime
