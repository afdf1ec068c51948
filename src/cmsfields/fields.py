"""Field builders.

Every builder returns a fresh ``dict`` describing one CMS field. Builders never
validate: unknown keyword arguments are passed through to the output verbatim
and merged after the core keys, so the last write wins.
"""

import logging

from . import consts
from .config import get_settings
from .enums import CONTAINER_WIDGETS, Widget
from .utils import (
    as_field_list,
    is_sequence,
    plain_value,
    plain_values,
    singularize,
    titleize,
)

logger = logging.getLogger(__name__)


class _Missing:
    def __repr__(self):
        return "MISSING"

    def __bool__(self):
        return False


MISSING = _Missing()
"""Marks an omitted ``default_value`` so that ``None`` stays a valid default."""


def field(
    name: str,
    widget: str = Widget.STRING.value,
    label: str | None = None,
    required: bool | None = None,
    collapsed: bool = False,
    fields=None,
    label_singular: str | None = None,
    field=None,
    default_value=MISSING,
    allow_add: bool | None = None,
    i18n=None,
    **kwargs,
) -> dict:
    """Build a generic field, a string field unless another widget is given.

    Args:
        name: The name of the field in code
        widget: Widget type, see :class:`~cmsfields.enums.Widget`
        label: Label shown in the CMS, defaults to the titleized name
        required: Defaults to True for object and list widgets only
        collapsed: Whether the field starts collapsed
        fields: Nested fields, emitted only when non-empty; any iterable is
            accepted and a single field mapping is wrapped into a list
        label_singular: Singular label for list widgets
        field: Single sub-field for lists of non-object values
        default_value: Emitted under the ``default`` key when given
        allow_add: Whether list entries can be added
        i18n: Internationalization flag, defaults to the configured value
        **kwargs: Widget-specific options passed through unchanged

    Returns:
        Field mapping
    """
    widget = plain_value(widget)

    if not label:
        label = titleize(name)

    if required is None:
        required = widget in CONTAINER_WIDGETS

    if i18n is None:
        settings = get_settings()
        if settings.emit_field_i18n:
            i18n = settings.field_i18n

    result = {
        "widget": widget,
        "name": name,
        "label": label,
        "required": required,
        "collapsed": collapsed,
    }

    if default_value is not MISSING:
        result["default"] = default_value

    if i18n is not None:
        result["i18n"] = i18n

    result.update(kwargs)

    fields = as_field_list(fields)
    if fields:
        result["fields"] = fields

    if field is not None:
        result["field"] = field

    if label_singular is not None:
        result["label_singular"] = label_singular

    if allow_add is not None:
        result["allow_add"] = allow_add

    logger.debug(f"Built {widget} field: {name}")
    return result


string = field


def required(name: str, **kwargs) -> dict:
    """Build a field that must be filled in."""
    return field(name, **{**kwargs, "required": True})


def title(name: str = "title", **kwargs) -> dict:
    """Build a required string field, named 'title' by default."""
    return field(name, **{**kwargs, "required": True})


def object_field(name: str, fields, **kwargs) -> dict:
    """Build an object field grouping ``fields``.

    A single field mapping is accepted and wrapped into a one-item list.
    """
    return required(
        name,
        **{**kwargs, "widget": Widget.OBJECT.value, "fields": as_field_list(fields)},
    )


group = object_field


def list_field(name: str, fields=None, **kwargs) -> dict:
    """Build a list field.

    ``fields`` given as a list or tuple becomes the ``fields`` key (a list of
    objects); anything else becomes the single ``field`` key (a list of plain
    values). The singular label is the explicit ``label_singular``, else the
    label minus its last character, else the name minus its last character.
    List fields start collapsed, with ``minimize_collapsed`` on.
    """
    args = dict(kwargs)
    args["widget"] = Widget.LIST.value

    if args.get("collapsed") is None:
        args["collapsed"] = True

    if args.get("label_singular") is None:
        label = args.get("label")
        args["label_singular"] = singularize(label) if label else singularize(name)

    if is_sequence(fields):
        args["fields"] = list(fields)
    elif fields is not None:
        args["field"] = fields

    if args.get("minimize_collapsed") is None:
        args["minimize_collapsed"] = True

    return required(name, **args)


def tags(name: str, **kwargs) -> dict:
    """Build a list of plain strings entered as comma separated text."""
    return list_field(name, None, **{"hint": get_settings().tags_hint, **kwargs})


def image(name: str = "image", **kwargs) -> dict:
    return field(name, **{**kwargs, "widget": Widget.IMAGE.value})


def text(name: str = "text", **kwargs) -> dict:
    return field(name, **{**kwargs, "widget": Widget.TEXT.value})


def markdown(name: str = "text", **kwargs) -> dict:
    """Build a minimal markdown field.

    The toolbar buttons come from the settings and no editor components are
    enabled; both can be overridden through ``buttons`` and
    ``editor_components``. ``buttons`` and ``modes`` accept
    :class:`~cmsfields.enums.Button` and :class:`~cmsfields.enums.Mode` members.
    """
    for key in ("buttons", "modes"):
        if kwargs.get(key) is not None:
            kwargs[key] = plain_values(kwargs[key])

    return field(
        name,
        **{
            "widget": Widget.MARKDOWN.value,
            "minimal": True,
            "buttons": list(get_settings().markdown_buttons),
            "editor_components": [],
            **kwargs,
        },
    )


md = markdown


def body(**kwargs) -> dict:
    """Build the markdown 'body' field of a post."""
    return markdown("body", **kwargs)


def date(name: str = "date", **kwargs) -> dict:
    """Build a datetime field showing the date only."""
    settings = get_settings()
    return field(
        name,
        **{
            "widget": Widget.DATETIME.value,
            "date_format": settings.date_format,
            "time_format": settings.time_format,
            "format": settings.datetime_format,
            **kwargs,
        },
    )


def boolean(name: str, **kwargs) -> dict:
    return field(
        name, **{"widget": Widget.BOOLEAN.value, "default_value": False, **kwargs}
    )


def option(value: str, label: str | None = None) -> dict:
    """Build a ``{value, label}`` pair for :func:`select`.

    Examples:
        >>> option("my-value")
        {'value': 'my-value', 'label': 'My value'}
    """
    return {"value": value, "label": label or titleize(value)}


def select(name: str, options, **kwargs) -> dict:
    """Build a select field from a sequence of :func:`option` pairs."""
    return field(
        name, **{"widget": Widget.SELECT.value, "options": list(options), **kwargs}
    )


def url(name: str = "url", **kwargs) -> dict:
    """Build a string field validated as an http(s) URL."""
    settings = get_settings()
    return field(
        name, **{"pattern": [settings.url_pattern, settings.url_message], **kwargs}
    )


def relation(
    name: str, collection: str, value_field: str, search_fields, **kwargs
) -> dict:
    """Build a field referencing entries of another collection.

    Args:
        name: The name of the field in code
        collection: Name of the referenced collection
        value_field: Field of the referenced entry stored as the value
        search_fields: Fields searched when picking an entry
        **kwargs: Extra relation options (multiple, file, display_fields,
            options_length, ...)
    """
    return field(
        name,
        **{
            "widget": Widget.RELATION.value,
            "collection": collection,
            "value_field": value_field,
            "search_fields": search_fields,
            **kwargs,
        },
    )


def number(name: str, **kwargs) -> dict:
    return field(name, **{"widget": Widget.NUMBER.value, **kwargs})


def int_field(name: str, **kwargs) -> dict:
    return number(name, **{"value_type": "int", **kwargs})


def float_field(name: str, **kwargs) -> dict:
    return number(name, **{"value_type": "float", **kwargs})


def range_field(
    name: str,
    min_value=consts.RANGE_MIN,
    max_value=consts.RANGE_MAX,
    step=consts.RANGE_STEP,
    **kwargs,
) -> dict:
    """Build a number field bounded by ``min``/``max`` with a ``step``."""
    return number(name, **{"min": min_value, "max": max_value, "step": step, **kwargs})


def percentage(name: str = "percentage", **kwargs) -> dict:
    return range_field(
        name,
        consts.PERCENTAGE_MIN,
        consts.PERCENTAGE_MAX,
        consts.PERCENTAGE_STEP,
        **kwargs,
    )


def file_field(name: str, **kwargs) -> dict:
    """Build a field holding a single uploaded file."""
    return field(
        name, **{"widget": Widget.FILE.value, "allow_multiple": False, **kwargs}
    )
