class ClaimMapError(Exception):
    """Base error for claim mapping."""


class FieldPathError(ClaimMapError):
    """Raised when a field path cannot be walked at all (bad root or path)."""


class MissingSubjectError(ClaimMapError):
    """Raised when a userinfo payload resolves to an empty subject."""


class UserInfoError(ClaimMapError):
    """Raised when the userinfo endpoint returns something other than a JSON object."""


class ConfigError(ClaimMapError):
    """Raised when provider configuration is invalid."""
