"""
Seed data for a fresh store.
"""

import structlog

from parametrization.core.interfaces import RecordStore
from parametrization.models.base import utc_now
from parametrization.schemas.parametrization import ToggleRecord

logger = structlog.get_logger()


DEFAULT_PARAMETRIZATIONS: list[tuple[str, str, bool]] = [
    ("NEW_PAYMENT_GATEWAY", "Enable New Payment Gateway", True),
    ("BETA_FEATURES", "Enable Beta Features", False),
    ("EMAIL_NOTIFICATIONS", "Enable Email Notifications", True),
    ("DARK_MODE", "Enable Dark Mode", False),
]


async def load_parametrization_data(store: RecordStore) -> list[ToggleRecord]:
    """
    Insert the default toggles if the store is empty.

    Writes straight to the store; the cache is still empty at startup.
    Returns the inserted records (empty list when data already exists).
    """
    if await store.count() > 0:
        logger.info("seed.skipped", reason="parametrization data already exists")
        return []

    now = utc_now()
    records = await store.save_all([
        ToggleRecord(key=key, description=description, enabled=enabled, created_at=now)
        for key, description, enabled in DEFAULT_PARAMETRIZATIONS
    ])
    logger.info("seed.loaded", count=len(records), keys=[r.key for r in records])
    return records
