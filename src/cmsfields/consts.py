"""Constants for cmsfields"""

# ==================== Content Paths ====================
CONTENT_PATH = "src/content/"  # pages: path + folder + "/" + file
POSTS_PATH = "src/content"  # collections: path + subfolder + "/" + name
PAGES_FOLDER = "pages"
DATA_FOLDER = "_data"
PAGE_EXTENSION = "yml"

# ==================== Collections ====================
POST_FORMAT = "frontmatter"
SLUG_TEMPLATE = "{{slug}}"

# ==================== Internationalization ====================
FIELD_I18N = True
CONTENT_I18N = True
EMIT_FIELD_I18N = True

# ==================== Markdown ====================
MARKDOWN_BUTTONS = (
    "bold",
    "italic",
    "link",
    "heading-three",
    "heading-four",
    "heading-five",
    "heading-six",
    "bulleted-list",
    "numbered-list",
)

# ==================== Dates ====================
DATE_FORMAT = "DD/MM/YYYY"
TIME_FORMAT = False  # date only
DATETIME_FORMAT = "LLL"

# ==================== URL Validation ====================
URL_PATTERN = (
    r"https?:\/\/(www\.)?[-a-zA-Z0-9@:%._\+~#=]{1,256}\.[a-zA-Z0-9()]{1,24}"
    r"\b([-a-zA-Z0-9()@:%_\+.~#?&//=]*)"
)
# Earlier revision: TLD bound of 6 and a trailing newline in the pattern
URL_PATTERN_EARLIER = (
    r"https?:\/\/(www\.)?[-a-zA-Z0-9@:%._\+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}"
    r"\b([-a-zA-Z0-9()@:%_\+.~#?&//=]*)"
    "\n"
)
URL_MESSAGE = "Must be a valid URL"

# ==================== Hints ====================
TAGS_HINT = "Comma separated. Make sure there is no comma at the end."

# ==================== Numbers ====================
RANGE_MIN = 0
RANGE_MAX = 1
RANGE_STEP = 0.1
PERCENTAGE_MIN = 1
PERCENTAGE_MAX = 100
PERCENTAGE_STEP = 1

# ==================== Settings ====================
ENV_PREFIX = "CMSFIELDS_"
