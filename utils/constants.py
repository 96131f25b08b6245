"""Utilities Constants
- Centralized defaults and user-facing messages used by services, screens and tests.
"""

# Artifacts (JSONL sync logs)
ARTIFACTS_DIR = "artifacts"  # relative to cwd

# Backend
DEFAULT_API_URL = "http://localhost:3000"
DEFAULT_TIMEOUT_S = 10.0

# Controller fallback messages (used when the remote error carries no text)
MSG_FETCH_USER_PLACES = "Error fetching user places!"
MSG_UPDATE_PLACES = "Error updating places!"
MSG_DELETE_PLACE = "Error deleting place"
MSG_FETCH_CATALOG = "Could not fetch places, please try again later."

# Remote client messages for non-2xx responses
MSG_HTTP_FETCH_PLACES = "Failed to fetch places"
MSG_HTTP_FETCH_USER_PLACES = "Failed to fetch user places"
MSG_HTTP_UPDATE_USER_PLACES = "Failed to update user data."

# Geo
EARTH_RADIUS_KM = 6371.0
