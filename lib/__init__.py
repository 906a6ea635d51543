# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Supabase wrapper and PostgREST error classification
# - cloudinary_client.py: Cloudinary image upload wrapper
# - utils.py: Input normalization helpers (list fields, optional values, email)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import (
    SupabaseClient,
    SupabaseClientError,
    is_missing_table_error,
    is_no_rows_error,
)
from lib.cloudinary_client import CloudinaryClient
from lib.utils import clean_optional_text, coerce_optional_int, is_valid_email, split_list_field

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    "is_missing_table_error",
    "is_no_rows_error",
    # Cloudinary
    "CloudinaryClient",
    # Utils
    "clean_optional_text",
    "coerce_optional_int",
    "is_valid_email",
    "split_list_field",
]
