import string

DATE_FORMAT = "%m/%d/%Y"

DEFAULT_UNIQUE_ID_LENGTH = 12
MAX_UNIQUE_ID_LENGTH = 256
UNIQUE_ID_ALPHABET = string.ascii_letters + string.digits

DEFAULT_FAKER_LOCALE = "en_US"
