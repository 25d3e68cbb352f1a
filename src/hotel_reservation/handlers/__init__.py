from .admin_resource import AdminResource
from .hotel_resource import HotelResource

__all__ = ["AdminResource", "HotelResource"]
