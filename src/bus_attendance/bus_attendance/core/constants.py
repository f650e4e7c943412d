"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PASSWORD_MIN_LENGTH = 4
DEFAULT_QR_BOX_SIZE = 10
DEFAULT_QR_BORDER = 2

# Keys of the JSON object carried inside a user's QR code.
QR_FIELD_USER_ID = "userId"
QR_FIELD_NAME = "name"
QR_FIELD_BUS = "bus"
QR_FIELD_ROLE = "role"

# Column widths in database/schema.sql
MAX_USER_KEY_LENGTH = 64
MAX_NAME_LENGTH = 120
MAX_BUS_LENGTH = 32
