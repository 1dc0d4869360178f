from .service import (
    load_business_hours,
    store_to_dict,
    matches_business_filter,
    list_stores,
    set_business_hours,
    migrate_legacy_business_hours,
)

__all__ = [
    'load_business_hours',
    'store_to_dict',
    'matches_business_filter',
    'list_stores',
    'set_business_hours',
    'migrate_legacy_business_hours',
]
