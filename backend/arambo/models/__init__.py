from arambo.models.admin import Admin
from arambo.models.furniture import Furniture
from arambo.models.property import Property
from arambo.models.trip import Trip
from arambo.models.truck import Truck

__all__ = [
    "Admin",
    "Property",
    "Truck",
    "Trip",
    "Furniture",
]
