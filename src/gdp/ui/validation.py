"""Pre-flight validation for the Streamlit UI.

No ORM, no DB: uses the API client for backend checks.
"""
from typing import List


def validate_storage_dir() -> List[str]:
    """Validate that client storage (token, favorites) can be written."""
    errors = []
    from gdp.config import settings
    storage_dir = settings.storage_dir

    try:
        storage_dir.mkdir(parents=True, exist_ok=True)
        test_file = storage_dir / ".write_test"
        test_file.touch()
        test_file.unlink()
    except OSError as e:
        errors.append(f"Cannot write to storage directory {storage_dir}: {e}")

    return errors


def validate_backend_connection() -> List[str]:
    """Validate that the FastAPI backend is reachable."""
    errors = []
    from gdp.ui.api_client import GDPClient, APIError
    client = GDPClient()
    try:
        client.health()
    except APIError as e:
        errors.append(f"Backend connection failed: {e}")
    finally:
        client.close()
    return errors


def run_all_checks() -> List[str]:
    """Run all validation checks."""
    errors = []
    errors.extend(validate_storage_dir())
    errors.extend(validate_backend_connection())
    return errors
