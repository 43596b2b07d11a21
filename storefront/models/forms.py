"""Form payloads posted by the contact and checkout pages"""

from pydantic import BaseModel, Field, ValidationError

from .contact import ServiceRequestType

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class CheckoutForm(BaseModel):
    """Checkout form fields"""
    name: str = Field(min_length=1, max_length=120)
    phone: str = Field(min_length=1, max_length=40)
    email: str = Field(pattern=EMAIL_PATTERN, max_length=254)
    address: str = Field(default="", max_length=1000)

    class Config:
        str_strip_whitespace = True


class ContactForm(BaseModel):
    """Contact and booking form fields"""
    name: str = Field(min_length=1, max_length=120)
    email: str = Field(pattern=EMAIL_PATTERN, max_length=254)
    phone: str = Field(min_length=1, max_length=40)
    service: ServiceRequestType = ServiceRequestType.EV_REPAIR
    details: str = Field(default="", max_length=4000)

    class Config:
        str_strip_whitespace = True


def field_errors(exc: ValidationError) -> dict[str, str]:
    """Map a validation error onto form field names for redisplay"""
    errors: dict[str, str] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "form"
        errors.setdefault(field, error["msg"])
    return errors
