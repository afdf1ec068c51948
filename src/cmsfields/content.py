"""Page and collection builders.

File and folder paths are plain string concatenations; nothing here touches
the filesystem.
"""

import logging

from .config import get_settings
from .utils import as_field_list, plain_value, singularize, titleize

logger = logging.getLogger(__name__)


def page(
    name: str,
    fields,
    label: str | None = None,
    filename: str | None = None,
    path: str | None = None,
    folder: str | None = None,
    extension: str | None = None,
    i18n=None,
    **kwargs,
) -> dict:
    """Build a single page stored in one file, a .yml file by default.

    Args:
        name: The name of the page in code
        fields: Fields of the page
        label: Label shown in the CMS, defaults to the titleized name
        filename: File name without extension, defaults to ``name``
        path: Content root, ending with a slash
        folder: Folder below ``path``
        extension: See :class:`~cmsfields.enums.PageExtension`
        i18n: Internationalization flag, emitted as ``_i18n`` when falsy
        **kwargs: Extra page options passed through unchanged

    Returns:
        Page mapping

    Examples:
        >>> page("home", [])["file"]
        'src/content/pages/home.yml'
    """
    settings = get_settings()
    if path is None:
        path = settings.content_path
    if folder is None:
        folder = settings.pages_folder
    if extension is None:
        extension = settings.page_extension
    extension = plain_value(extension)
    if i18n is None:
        i18n = settings.content_i18n

    result = {
        "name": name,
        "file": f"{path}{folder}/{filename or name}.{extension}",
        "label": label or titleize(name),
        "fields": as_field_list(fields),
        "i18n" if i18n else "_i18n": i18n,
        **kwargs,
    }

    logger.debug(f"Built page {name}: {result['file']}")
    return result


def settings_page(name: str, fields, **kwargs) -> dict:
    """Build a page stored in the data folder."""
    if kwargs.get("folder") is None:
        kwargs["folder"] = get_settings().data_folder
    return page(name, fields, **kwargs)


def post_type(
    name: str,
    fields,
    label: str | None = None,
    format: str | None = None,
    path: str | None = None,
    subfolder: str | None = "",
    slug: str | None = None,
    label_singular: str | None = None,
    i18n=None,
    **kwargs,
) -> dict:
    """Build a folder collection of posts, front matter files by default.

    The folder is ``path + subfolder + "/" + name``. Entries can be created
    from the CMS and the editor preview is disabled.

    Examples:
        >>> post_type("articles", [])["label_singular"]
        'article'
    """
    settings = get_settings()
    if format is None:
        format = settings.post_format
    format = plain_value(format)
    if path is None:
        path = settings.posts_path
    if slug is None:
        slug = settings.slug
    if i18n is None:
        i18n = settings.content_i18n

    result = {
        "name": name,
        "folder": f"{path}{subfolder or ''}/{name}",
        "label": label or titleize(name),
        "format": format,
        "fields": as_field_list(fields),
        "editor": {"preview": False},
        "label_singular": label_singular or singularize(name),
        "create": True,
        "slug": slug,
        "i18n": i18n,
        **kwargs,
    }

    logger.debug(f"Built post type {name}: {result['folder']}")
    return result
