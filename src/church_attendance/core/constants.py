"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MEMBER_ID_LENGTH = 6
DEFAULT_PAGE_SIZE = 5
DEFAULT_TOP_ATTENDEES = 5
DEFAULT_RECENT_EVENTS = 5
DEFAULT_MINISTRY = "None"

SETTINGS_KEY = "app"
DEFAULT_SETTINGS = {
    "churchName": "Church of God",
    "slogan": "Puelay",
    "logo": "",
    "theme": "light",
}

GATEWAY_TIMEOUT_SECONDS = 3.0
MIRROR_LATENCY_SECONDS = 0.2

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"
MEMBER_NOT_FOUND_MESSAGE = "Member not found. Please verify your phone number or email."
MEMBER_ID_NOT_FOUND_MESSAGE = "Member ID not found."
MISSING_MEMBER_MESSAGE = "Member does not exist"
MISSING_EVENT_MESSAGE = "Event does not exist"
DUPLICATE_ATTENDANCE_MESSAGE = "Attendance record already exists"

API_PREFIX = "/api"
