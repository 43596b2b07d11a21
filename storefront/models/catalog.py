"""Catalog models for the storefront"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ItemKind(str, Enum):
    SERVICE = "service"
    PRODUCT = "product"
    COURSE = "course"


class CatalogItem(BaseModel):
    """Service, product or training course offered by the garage"""
    id: str
    kind: ItemKind
    title: str
    description: str = ""
    price: int = Field(ge=0)
    sku: Optional[str] = None
    stock: Optional[int] = Field(default=None, ge=0)
    length: Optional[str] = None

    class Config:
        frozen = True


class ServiceHighlight(BaseModel):
    """Bullet-point summary of a workshop service"""
    title: str
    bullets: tuple[str, ...]

    class Config:
        frozen = True


class CompanyInfo(BaseModel):
    """Contact details shown in the header, footer and contact page"""
    name: str
    tagline: str
    email: str
    phone: str
    address: str
    hours: str

    class Config:
        frozen = True
