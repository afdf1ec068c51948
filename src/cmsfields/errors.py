"""Exception definitions for cmsfields.

Builders never raise: they fill defaults and pass unknown options through.
These exceptions belong to the layers around them (settings loading and the
command line).
"""


class CmsFieldsException(Exception):
    """Base exception for all cmsfields errors.

    Use this as a catch-all for cmsfields-specific errors when you don't need
    to handle specific exception types.
    """

    pass


class ConfigException(CmsFieldsException):
    """Raised when settings loading or validation fails.

    Use this exception when:
    - The settings file cannot be found
    - The TOML syntax is invalid
    - Settings validation fails (unknown revision, wrong value types)
    """

    pass


class TargetException(CmsFieldsException):
    """Raised when a render target cannot be resolved.

    Use this exception when:
    - The target is not in ``module:attribute`` form
    - The module cannot be imported or the attribute does not exist
    - Calling the target fails or its result cannot be serialized
    """

    pass
