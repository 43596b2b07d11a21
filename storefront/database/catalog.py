"""Static catalog for the storefront"""

from typing import Optional

from ..models.catalog import CatalogItem, CompanyInfo, ItemKind, ServiceHighlight

COMPANY = CompanyInfo(
    name="Fix EV Garage",
    tagline="EV • ECU • BCM • VFD • Training",
    email="service@fixevgarage.example",
    phone="+91 98765 43210",
    address="123 Tech Lane, Industrial Estate, YourCity",
    hours="Mon–Sat 9:00–18:00",
)

# Workshop services; price is the bench diagnostic fee
SERVICES: tuple[CatalogItem, ...] = (
    CatalogItem(
        id="ev-repair",
        kind=ItemKind.SERVICE,
        title="EV Car Repair",
        description=(
            "High-voltage battery diagnosis, motor/inverter repair, charging & BMS "
            "troubleshooting, software updates and ECU flashing."
        ),
        price=2500,
    ),
    CatalogItem(
        id="module-repair",
        kind=ItemKind.SERVICE,
        title="ECM / BCM & Module Repair",
        description=(
            "Board-level diagnostics and repair for vehicle controllers, solder/BGA-level "
            "fixes, connector repair and firmware recovery."
        ),
        price=1800,
    ),
    CatalogItem(
        id="aux-modules",
        kind=ItemKind.SERVICE,
        title="Chargers & Converters",
        description="Charger repairs, DC–DC converter troubleshooting, CAN bus simulation and bench testing.",
        price=1200,
    ),
)

SERVICE_FEATURES: tuple[str, ...] = (
    "Bench testing with simulated sensors",
    "Firmware reprogramming & cloning",
    "Connector & harness repair",
)

VFD_SERVICE = ServiceHighlight(
    title="Industrial VFD Repair",
    bullets=(
        "Power stage & IGBT replacement",
        "Control board fault repair",
        "Encoder & feedback loop testing",
        "Parameter recovery, backup & onsite support",
    ),
)

PRODUCTS: tuple[CatalogItem, ...] = (
    CatalogItem(
        id="p1",
        kind=ItemKind.PRODUCT,
        title="Refurbished ECM",
        description="Bench-tested engine control module with cloned calibration on request.",
        price=6500,
        sku="ECM-RF-01",
        stock=4,
    ),
    CatalogItem(
        id="p2",
        kind=ItemKind.PRODUCT,
        title="VFD 2.2kW (3ph)",
        description="Three-phase variable frequency drive for pumps, fans and conveyors.",
        price=24500,
        sku="VFD-2K2",
        stock=7,
    ),
    CatalogItem(
        id="p3",
        kind=ItemKind.PRODUCT,
        title="OBD-II Advanced Scanner",
        description="Live data, fault codes and module coding for most EV and ICE platforms.",
        price=12800,
        sku="SCAN-ADV",
        stock=12,
    ),
    CatalogItem(
        id="p4",
        kind=ItemKind.PRODUCT,
        title="HV Connector Kit",
        description="Assorted high-voltage connectors, seals and terminals.",
        price=1450,
        sku="HV-KIT",
        stock=25,
    ),
)

COURSES: tuple[CatalogItem, ...] = (
    CatalogItem(
        id="t1",
        kind=ItemKind.COURSE,
        title="EV Fundamentals",
        description="High-voltage safety, battery packs, motors and charging systems.",
        price=6000,
        length="2 days",
    ),
    CatalogItem(
        id="t2",
        kind=ItemKind.COURSE,
        title="Module Repair & Diagnostics",
        description="Board-level fault finding, soldering and firmware recovery on vehicle controllers.",
        price=12500,
        length="3 days",
    ),
    CatalogItem(
        id="t3",
        kind=ItemKind.COURSE,
        title="Industrial VFD Repair",
        description="Power stage testing, IGBT replacement and parameter recovery on industrial drives.",
        price=9000,
        length="2 days",
    ),
)


class CatalogStore:
    """Read-only access to services, products and training courses"""

    def __init__(
        self,
        services: tuple[CatalogItem, ...] = SERVICES,
        products: tuple[CatalogItem, ...] = PRODUCTS,
        courses: tuple[CatalogItem, ...] = COURSES,
        company: CompanyInfo = COMPANY,
        vfd_service: ServiceHighlight = VFD_SERVICE,
    ):
        self.services = tuple(services)
        self.products = tuple(products)
        self.courses = tuple(courses)
        self.company = company
        self.vfd_service = vfd_service
        self._index: dict[str, CatalogItem] = {}
        for item in (*self.services, *self.products, *self.courses):
            if item.id in self._index:
                raise ValueError(f"Duplicate catalog id: {item.id}")
            self._index[item.id] = item

    def list_services(self) -> list[CatalogItem]:
        return list(self.services)

    def list_products(self) -> list[CatalogItem]:
        return list(self.products)

    def list_courses(self) -> list[CatalogItem]:
        return list(self.courses)

    def get_service(self, service_id: str) -> Optional[CatalogItem]:
        """Get a service by ID"""
        return self._get(service_id, ItemKind.SERVICE)

    def get_product(self, product_id: str) -> Optional[CatalogItem]:
        """Get a product by ID"""
        return self._get(product_id, ItemKind.PRODUCT)

    def get_course(self, course_id: str) -> Optional[CatalogItem]:
        """Get a training course by ID"""
        return self._get(course_id, ItemKind.COURSE)

    def find_item(self, item_id: str) -> Optional[CatalogItem]:
        """Get any catalog entry by ID, whatever its kind"""
        return self._index.get(item_id)

    def _get(self, item_id: str, kind: ItemKind) -> Optional[CatalogItem]:
        item = self._index.get(item_id)
        if item is None or item.kind != kind:
            return None
        return item


# Singleton instance
catalog_store = CatalogStore()
