"""Fix EV Garage storefront"""

__version__ = "1.0.0"
