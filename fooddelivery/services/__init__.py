from . import restaurant_service
from .restaurant_service import RestaurantRepository

__all__ = [
    "restaurant_service",
    "RestaurantRepository",
]
