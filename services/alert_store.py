"""
Alert Store for AlertsDB
Paginated reads, create, update and bulk clear over the alert collections
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from sqlalchemy import update

from models import WeatherGovAlert, NasaFireAlert, AnalyticsEntry

logger = logging.getLogger(__name__)

# Collection name (URL path segment and table name) -> (model, sort column)
COLLECTIONS = {
    WeatherGovAlert.__tablename__: (WeatherGovAlert, 'created_at'),
    NasaFireAlert.__tablename__: (NasaFireAlert, 'date'),
}

# Deleted by clear_all, in this order
CLEARED_MODELS = (WeatherGovAlert, NasaFireAlert, AnalyticsEntry)


class AlertNotFound(Exception):
    """Raised when an update targets an id with no stored record"""

    def __init__(self, collection: str, alert_id: int):
        super().__init__(f"{collection} record {alert_id} not found")
        self.collection = collection
        self.alert_id = alert_id


@dataclass
class AlertPage:
    """One page of alerts plus the unfiltered record count"""
    data: List[Dict[str, Any]] = field(default_factory=list)
    total: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {'data': self.data, 'total': self.total}


def flatten_tags(tags) -> Optional[str]:
    """
    Store tags as a single string: lists are joined with ', ',
    other truthy values are stringified and empty values become NULL
    """
    if isinstance(tags, (list, tuple)):
        return ', '.join(str(tag) for tag in tags)
    if tags:
        return str(tags)
    return None


class AlertStore:
    """
    Service for reading and writing alert records

    Constructed once at startup with the database session and shared by
    every request; all queries run through the injected session.
    """

    def __init__(self, session):
        self.session = session

    def _resolve(self, collection: str):
        try:
            return COLLECTIONS[collection]
        except KeyError:
            raise ValueError(f"Unknown alert collection: {collection}") from None

    def _values(self, model, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Pick every mutable column from the request body; missing ones become None"""
        values = {name: fields.get(name) for name in model.FIELDS}
        values['tags'] = flatten_tags(values['tags'])
        return values

    def list_page(self, collection: str, limit: int, offset: int) -> AlertPage:
        """
        Get one page of alerts ordered by the collection's time field, newest first

        Args:
            collection: Collection name (weatherGovAlerts or nasaFireAlerts)
            limit: Maximum number of records to return
            offset: Number of records to skip

        Returns:
            AlertPage with the serialized records and the total record count.
            The count is a separate read and is not scoped to the page.
        """
        model, sort_field = self._resolve(collection)
        sort_column = getattr(model, sort_field)

        records = (
            self.session.query(model)
            .order_by(sort_column.desc(), model.id.desc())
            .limit(limit)
            .offset(offset)
            .all()
        )
        total = self.session.query(model).count()

        return AlertPage(data=[record.to_dict() for record in records], total=total)

    def create(self, collection: str, fields: Dict[str, Any]) -> int:
        """Insert a new alert and return its assigned id"""
        model, _ = self._resolve(collection)

        try:
            record = model(**self._values(model, fields))
            self.session.add(record)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        logger.info(f"Created {collection} record {record.id}")
        return record.id

    def update(self, collection: str, alert_id: int, fields: Dict[str, Any]) -> int:
        """
        Overwrite every mutable field of an existing alert

        Raises:
            AlertNotFound: If no record has this id. Nothing is written.
        """
        model, _ = self._resolve(collection)

        try:
            result = self.session.execute(
                update(model)
                .where(model.id == alert_id)
                .values(**self._values(model, fields))
            )
            if result.rowcount == 0:
                self.session.rollback()
                raise AlertNotFound(collection, alert_id)
            self.session.commit()
        except AlertNotFound:
            raise
        except Exception:
            self.session.rollback()
            raise

        logger.info(f"Updated {collection} record {alert_id}")
        return alert_id

    def clear_all(self) -> None:
        """
        Delete every alert and analytics row in a single transaction.
        Either all three tables are emptied or none are.
        """
        try:
            counts = {}
            for model in CLEARED_MODELS:
                counts[model.__tablename__] = self.session.query(model).delete()
            self.session.commit()
        except Exception:
            self.session.rollback()
            logger.exception("Clearing alert tables failed, transaction rolled back")
            raise

        logger.info(f"Cleared all records: {counts}")
