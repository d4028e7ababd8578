from app.models.vehicle import Vehicle

__all__ = ["Vehicle"]
