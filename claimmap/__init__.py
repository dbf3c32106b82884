"""Claim mapping for generic identity providers."""
from .lib.errors import (
    ClaimMapError,
    ConfigError,
    FieldPathError,
    MissingSubjectError,
    UserInfoError,
)
from .lib.naming import to_snake_case
from .lib.field_mapping import (
    get_mapping_field,
    get_boolean_field_by_path,
    get_string_field_by_path,
)
from .lib.claims import CLAIM_FIELDS, UserClaims, map_user_claims

__all__ = [
    "ClaimMapError",
    "ConfigError",
    "FieldPathError",
    "MissingSubjectError",
    "UserInfoError",
    "to_snake_case",
    "get_mapping_field",
    "get_boolean_field_by_path",
    "get_string_field_by_path",
    "CLAIM_FIELDS",
    "UserClaims",
    "map_user_claims",
]
