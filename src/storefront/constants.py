"""Storefront-wide constants."""

# Paging
DEFAULT_PAGE_SIZE = 12  # storefront grid (3 x 4)
ADMIN_PAGE_SIZE = 10

# Field lengths
MAX_PRODUCT_NAME_LENGTH = 150
MAX_PRODUCT_DESCRIPTION_LENGTH = 2000
MAX_IMAGE_URL_LENGTH = 500
MAX_CATEGORY_NAME_LENGTH = 120
MAX_CATEGORY_DESCRIPTION_LENGTH = 500
MAX_REVIEW_COMMENT_LENGTH = 1000

# Pricing
MAX_PRODUCT_PRICE = 100_000.0
MAX_ORDER_ITEM_QUANTITY = 10_000

# Reviews
MIN_RATING = 0
MAX_RATING = 5

# Images
MAX_IMAGE_SIZE_BYTES = 5 * 1024 * 1024
ALLOWED_IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".webp")
PRODUCT_IMAGE_URL_PREFIX = "/images/products/"

# Product cards
PRODUCT_SUMMARY_LENGTH = 150

# Analytics
DEFAULT_TOP_ITEMS = 10
DEFAULT_PERIOD_DAYS = 30

# Identity
MINIMUM_CUSTOMER_AGE = 18
AGE_CONSENT_COOKIE = "AgeVerificationConsent"
