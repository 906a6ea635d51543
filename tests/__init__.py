# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Lumen Sphere API:
# - conftest.py: In-memory Supabase/Cloudinary fakes and fixtures
# - test_models.py, test_utils.py: Unit tests for input normalization
# - test_supabase_client.py, test_cloudinary_client.py: Backend wrappers
# - test_projects.py, test_posts.py, test_leads.py, ...: Endpoint tests
#
# Run tests with: pytest
# =============================================================================
