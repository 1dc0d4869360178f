"""
Store persistence helpers.
Loads business hours from stored rows and filters stores by when they take orders.
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from app import models
from app.services.business import (
    WEEKDAYS,
    BusinessHoursData,
    sanitize_business_hours,
    parse_legacy_text,
    is_open_on,
    is_open_at,
    to_dict,
)

logger = logging.getLogger(__name__)


def load_business_hours(raw: Any) -> BusinessHoursData:
    """read stored hours, upgrading legacy free-text values on the fly."""
    if isinstance(raw, str):
        return parse_legacy_text(raw)
    return sanitize_business_hours(raw)


def is_legacy_business_hours(raw: Any) -> bool:
    return isinstance(raw, str)


def store_to_dict(store: models.Store) -> Dict[str, Any]:
    return {
        "id": store.id,
        "name": store.name,
        "address": store.address,
        "latitude": store.latitude,
        "longitude": store.longitude,
        "categories": store.categories or [],
        "business_hours": to_dict(load_business_hours(store.business_hours)),
        "parking_info": store.parking_info or "",
        "website_url": store.website_url or "",
        "google_map_url": store.google_map_url or "",
        "sns_urls": store.sns_urls or [],
        "tags": store.tags or [],
        "photos": store.photos or [],
        "created_at": store.created_at,
        "updated_at": store.updated_at,
    }


def matches_business_filter(raw_hours: Any, business_day: Optional[str], business_time: Optional[str]) -> bool:
    """
    Check a store against the business day/time filters of the store list.

    - day and time: takes orders on that day at that time
    - day only: not a closed day
    - time only: takes orders at that time on at least one day
    """
    if not business_day and not business_time:
        return True

    if business_day and not business_time:
        # stores without any recorded hours are never excluded by day alone
        if raw_hours is None:
            return True
        return is_open_on(load_business_hours(raw_hours), business_day)

    if raw_hours is None:
        return False
    data = load_business_hours(raw_hours)
    if business_day:
        return is_open_at(data, business_day, business_time)
    return any(is_open_at(data, day, business_time) for day in WEEKDAYS)


def list_stores(
    db: Session,
    name: Optional[str] = None,
    business_day: Optional[str] = None,
    business_time: Optional[str] = None,
    limit: int = 50,
    offset: int = 0,
) -> List[models.Store]:
    q = db.query(models.Store)
    if name:
        q = q.filter(models.Store.name.ilike(f"%{name}%"))
    q = q.order_by(models.Store.created_at.desc(), models.Store.id)

    if not business_day and not business_time:
        return q.offset(offset).limit(limit).all()

    # hours are JSON, so the day/time filter runs here rather than in SQL
    stores = [s for s in q.all() if matches_business_filter(s.business_hours, business_day, business_time)]
    return stores[offset:offset + limit]


def set_business_hours(store: models.Store, raw: Any) -> BusinessHoursData:
    """store the structured form, converting legacy text; returns what was written."""
    data = load_business_hours(raw)
    store.business_hours = to_dict(data)
    return data


def migrate_legacy_business_hours(db: Session) -> int:
    """convert every free-text business_hours value to the structured form."""
    migrated = 0
    for store in db.query(models.Store).all():
        if not is_legacy_business_hours(store.business_hours):
            continue
        logger.info(f"Migrating legacy business hours for store {store.id}")
        store.business_hours = to_dict(parse_legacy_text(store.business_hours))
        db.add(store)
        migrated += 1
    return migrated
