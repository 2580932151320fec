from .restaurant_routes import restaurant_bp

__all__ = ["restaurant_bp"]
