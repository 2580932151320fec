import logging
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from ..errors import StorageFault
from ..models import Restaurant

logger = logging.getLogger(__name__)

# signed 64-bit BIGINT range; larger ids cannot exist in the table
MAX_ID = 2 ** 63 - 1


def _valid_id(restaurant_id) -> bool:
    return -MAX_ID - 1 <= restaurant_id <= MAX_ID


class RestaurantRepository:
    """CRUD access to the ``restaurants`` table.

    The session is handed in by the caller (Flask-SQLAlchemy's scoped
    ``db.session`` in the app, a plain ``Session`` in scripts). Any
    SQLAlchemy error is rolled back and re-raised as ``StorageFault``.
    """

    def __init__(self, session):
        self.session = session

    def _fault(self, action: str, exc: SQLAlchemyError) -> StorageFault:
        try:
            self.session.rollback()
        except SQLAlchemyError:
            logger.debug("rollback after failed %s also failed", action)
        logger.exception("Failed to %s", action)
        return StorageFault(f"Failed to {action}: {exc}")

    def find_all(self) -> List[Restaurant]:
        """Return every restaurant ordered by id; empty list when the table is empty."""
        try:
            stmt = select(Restaurant).order_by(Restaurant.id)
            return list(self.session.scalars(stmt).all())
        except SQLAlchemyError as exc:
            raise self._fault("list restaurants", exc) from exc

    def find_by_id(self, restaurant_id: int) -> Optional[Restaurant]:
        if not _valid_id(restaurant_id):
            return None
        try:
            return self.session.get(Restaurant, restaurant_id)
        except SQLAlchemyError as exc:
            raise self._fault(f"load restaurant {restaurant_id}", exc) from exc

    def save(self, restaurant: Restaurant) -> Restaurant:
        """Insert a new restaurant or update an existing one, then commit.

        A record whose id is set but not loaded in this session (e.g. built
        from a request body) is merged onto the stored row. The returned
        record is refreshed, so it stays readable after the session closes.
        """
        try:
            if restaurant.id is not None and restaurant not in self.session:
                restaurant = self.session.merge(restaurant)
            else:
                self.session.add(restaurant)
            self.session.commit()
            self.session.refresh(restaurant)
            return restaurant
        except SQLAlchemyError as exc:
            raise self._fault("save restaurant", exc) from exc

    def delete_by_id(self, restaurant_id: int) -> None:
        """Delete the row if present; missing ids are ignored."""
        if not _valid_id(restaurant_id):
            return
        try:
            restaurant = self.session.get(Restaurant, restaurant_id)
            if restaurant is None:
                return
            self.session.delete(restaurant)
            self.session.commit()
        except SQLAlchemyError as exc:
            raise self._fault(f"delete restaurant {restaurant_id}", exc) from exc

    def count(self) -> int:
        try:
            return self.session.scalar(select(func.count()).select_from(Restaurant))
        except SQLAlchemyError as exc:
            raise self._fault("count restaurants", exc) from exc
