import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app import models
from app.core.config import settings
from app.db.session import get_db
from app.schemas.business_hours import TIME_PATTERN, BusinessHoursOut, ScheduleRequest, LegacyTextOut
from app.schemas.stores import StoreCreate, StoreUpdate, StoreOut
from app.services.business import validate_business_day, generate_legacy_text, to_dict
from app.services.stores import list_stores as query_stores, load_business_hours, set_business_hours, store_to_dict

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/stores", tags=["stores"])


def _get_store_or_404(db: Session, store_id: str) -> models.Store:
    store = db.get(models.Store, store_id)
    if not store:
        raise HTTPException(status_code=404, detail="Store not found")
    return store


@router.get("", response_model=List[StoreOut])
def list_stores(
    name: Optional[str] = None,
    business_day: Optional[str] = None,
    business_time: Optional[str] = Query(None, pattern=TIME_PATTERN),
    limit: int = Query(settings.STORE_LIST_DEFAULT_LIMIT, ge=1, le=settings.STORE_LIST_MAX_LIMIT),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
):
    """list stores, newest first, optionally only those open on a day and/or at a time."""
    try:
        validate_business_day(business_day or "")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    stores = query_stores(
        db,
        name=name,
        business_day=business_day,
        business_time=business_time,
        limit=limit,
        offset=offset,
    )
    return [store_to_dict(s) for s in stores]


@router.get("/{store_id}", response_model=StoreOut)
def get_store(store_id: str, db: Session = Depends(get_db)):
    return store_to_dict(_get_store_or_404(db, store_id))


@router.post("", response_model=StoreOut, status_code=201)
def create_store(payload: StoreCreate, db: Session = Depends(get_db)):
    """create a store; business hours are sanitized before they are stored."""
    store = models.Store(
        name=payload.name,
        address=payload.address,
        latitude=payload.latitude,
        longitude=payload.longitude,
        categories=payload.categories,
        parking_info=payload.parking_info,
        website_url=payload.website_url,
        google_map_url=payload.google_map_url,
        sns_urls=payload.sns_urls,
        tags=payload.tags,
        photos=payload.photos,
    )
    set_business_hours(store, payload.business_hours)
    db.add(store)
    db.commit()
    db.refresh(store)
    logger.info(f"Created store {store.id}")
    return store_to_dict(store)


@router.put("/{store_id}", response_model=StoreOut)
def update_store(store_id: str, payload: StoreUpdate, db: Session = Depends(get_db)):
    store = _get_store_or_404(db, store_id)

    # update only provided fields
    changes = payload.model_dump(exclude_unset=True)
    if "business_hours" in changes:
        set_business_hours(store, changes.pop("business_hours"))
    for key, value in changes.items():
        if value is not None:
            setattr(store, key, value)

    db.add(store)
    db.commit()
    db.refresh(store)
    return store_to_dict(store)


@router.delete("/{store_id}", status_code=204)
def delete_store(store_id: str, db: Session = Depends(get_db)):
    store = _get_store_or_404(db, store_id)
    db.delete(store)
    db.commit()
    logger.info(f"Deleted store {store_id}")


@router.get("/{store_id}/business-hours", response_model=BusinessHoursOut)
def get_store_business_hours(store_id: str, db: Session = Depends(get_db)):
    store = _get_store_or_404(db, store_id)
    return to_dict(load_business_hours(store.business_hours))


@router.put("/{store_id}/business-hours", response_model=BusinessHoursOut)
def update_store_business_hours(store_id: str, payload: ScheduleRequest, db: Session = Depends(get_db)):
    """replace the weekly schedule submitted by the hours editor."""
    store = _get_store_or_404(db, store_id)
    data = set_business_hours(store, payload.business_hours)
    db.add(store)
    db.commit()
    return to_dict(data)


@router.get("/{store_id}/business-hours/legacy-text", response_model=LegacyTextOut)
def get_store_legacy_text(store_id: str, db: Session = Depends(get_db)):
    """render the store's hours in the old free-text format."""
    store = _get_store_or_404(db, store_id)
    return {"text": generate_legacy_text(load_business_hours(store.business_hours))}
