"""Build the configured candidate store."""

from __future__ import annotations

import logging

from app.core.config import Settings
from app.stores.base import CandidateStore
from app.stores.memory import MemoryCandidateStore

logger = logging.getLogger(__name__)


def create_store(config: Settings) -> CandidateStore:
    """Return a new store for ``config.STORE_BACKEND``."""
    if config.STORE_BACKEND == "supabase":
        from app.db.supabase import get_supabase
        from app.stores.supabase import SupabaseCandidateStore

        store: CandidateStore = SupabaseCandidateStore(
            get_supabase(), table=config.CANDIDATES_TABLE
        )
    else:
        store = MemoryCandidateStore()
    logger.info("store_created", extra={"backend": config.STORE_BACKEND})
    return store
