"""Navigation shell: header links, active section and cart badge"""

from pydantic import BaseModel

from ..models.catalog import CompanyInfo


class NavEntry(BaseModel):
    label: str
    path: str


class NavLink(BaseModel):
    label: str
    path: str
    active: bool = False


class HeaderView(BaseModel):
    """Everything the persistent page header displays"""
    company: CompanyInfo
    nav: list[NavLink]
    cart_count: int = 0

    @property
    def show_badge(self) -> bool:
        return self.cart_count > 0


NAV_ENTRIES: tuple[NavEntry, ...] = (
    NavEntry(label="Services", path="/services"),
    NavEntry(label="Industrial VFD", path="/vfd"),
    NavEntry(label="Parts & Tools", path="/parts"),
    NavEntry(label="Training", path="/training"),
    NavEntry(label="Contact", path="/contact"),
)


def is_active(current_path: str, target: str) -> bool:
    """A section is active for its own path and everything below it"""
    return current_path.startswith(target)


def build_nav(current_path: str, entries: tuple[NavEntry, ...] = NAV_ENTRIES) -> list[NavLink]:
    return [
        NavLink(label=entry.label, path=entry.path, active=is_active(current_path, entry.path))
        for entry in entries
    ]


def build_header(current_path: str, cart_count: int, company: CompanyInfo) -> HeaderView:
    return HeaderView(company=company, nav=build_nav(current_path), cart_count=cart_count)
