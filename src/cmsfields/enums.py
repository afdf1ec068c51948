"""Enumeration type definitions"""

from enum import Enum


class Widget(str, Enum):
    """Input control types understood by the CMS"""

    BOOLEAN = "boolean"
    CODE = "code"
    COLOR = "color"
    DATETIME = "datetime"
    FILE = "file"
    HIDDEN = "hidden"
    IMAGE = "image"
    LIST = "list"
    MAP = "map"
    MARKDOWN = "markdown"
    NUMBER = "number"
    OBJECT = "object"
    RELATION = "relation"
    SELECT = "select"
    STRING = "string"
    TEXT = "text"


class Button(str, Enum):
    """Markdown editor toolbar buttons"""

    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"
    LINK = "link"
    HEADING_ONE = "heading-one"
    HEADING_TWO = "heading-two"
    HEADING_THREE = "heading-three"
    HEADING_FOUR = "heading-four"
    HEADING_FIVE = "heading-five"
    HEADING_SIX = "heading-six"
    QUOTE = "quote"
    BULLETED_LIST = "bulleted-list"
    NUMBERED_LIST = "numbered-list"


class Mode(str, Enum):
    RAW = "raw"
    RICH_TEXT = "rich_text"


class PostFormat(str, Enum):
    YML = "yml"
    YAML = "yaml"
    TOML = "toml"
    JSON = "json"
    FRONTMATTER = "frontmatter"
    YAML_FRONTMATTER = "yaml-frontmatter"
    TOML_FRONTMATTER = "toml-frontmatter"
    JSON_FRONTMATTER = "json-frontmatter"


class PageExtension(str, Enum):
    YML = "yml"
    YAML = "yaml"
    TOML = "toml"
    JSON = "json"
    MD = "md"
    MARKDOWN = "markdown"
    HTML = "html"


class Revision(str, Enum):
    """Builder behavior revisions that disagree on some defaults"""

    EARLIER = "earlier"
    LATER = "later"


CONTAINER_WIDGETS = frozenset({Widget.OBJECT.value, Widget.LIST.value})
