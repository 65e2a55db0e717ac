# appseed/constants.py

TYPE_URL_PREFIX = "type.googleapis.com/"

DEV_CHANNEL_TYPE = TYPE_URL_PREFIX + "sdk.Dev"
GUEST_CHANNEL_TYPE = TYPE_URL_PREFIX + "sdk.Guest"

# numeric app keys are stored as uint32
MAX_APP_KEY = 2 ** 32 - 1

DEFAULT_PROVIDER = "sqlite"
DEFAULT_DB_PATH = "db/appseed.db"
