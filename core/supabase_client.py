# core/supabase_client.py
import logging
from typing import Optional

from core.config import SUPABASE_URL, SUPABASE_KEY

logger = logging.getLogger(__name__)

_supabase_client: Optional[object] = None


def get_supabase_client():
    """Shared supabase client (anon key) for storage and auth."""
    global _supabase_client

    if _supabase_client is None:
        from supabase import create_client

        if not SUPABASE_URL or not SUPABASE_KEY:
            raise ValueError("Supabase credentials missing in .env file")

        try:
            _supabase_client = create_client(SUPABASE_URL, SUPABASE_KEY)
            logger.info("Supabase client initialized")
        except Exception as e:
            logger.error(f"Failed to initialize Supabase client: {e}")
            raise

    return _supabase_client
