from __future__ import annotations

from .config import Settings, configure, get_settings
from .content import page, post_type, settings_page
from .enums import Button, Mode, PageExtension, PostFormat, Revision, Widget
from .fields import (
    MISSING,
    body,
    boolean,
    date,
    field,
    file_field,
    float_field,
    group,
    image,
    int_field,
    list_field,
    markdown,
    md,
    number,
    object_field,
    option,
    percentage,
    range_field,
    relation,
    required,
    select,
    string,
    tags,
    text,
    title,
    url,
)
from .utils import titleize

__all__ = [
    "Button",
    "MISSING",
    "Mode",
    "PageExtension",
    "PostFormat",
    "Revision",
    "Settings",
    "Widget",
    "body",
    "boolean",
    "configure",
    "date",
    "field",
    "file_field",
    "float_field",
    "get_settings",
    "group",
    "image",
    "int_field",
    "list_field",
    "markdown",
    "md",
    "number",
    "object_field",
    "option",
    "page",
    "percentage",
    "post_type",
    "range_field",
    "relation",
    "required",
    "select",
    "settings_page",
    "string",
    "tags",
    "text",
    "title",
    "titleize",
    "url",
]
