import logging
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .errors import MissingSubjectError
from .field_mapping import (
    get_boolean_field_by_path,
    get_mapping_field,
    get_string_field_by_path,
)
from .naming import to_snake_case

_LOGGER = logging.getLogger(__name__)

# (logical name, kind); order is the order claims are resolved in
CLAIM_FIELDS: List[Tuple[str, str]] = [
    ("Subject", "string"),
    ("Issuer", "string"),
    ("Name", "string"),
    ("GivenName", "string"),
    ("FamilyName", "string"),
    ("MiddleName", "string"),
    ("NickName", "string"),
    ("PreferredUsername", "string"),
    ("Profile", "string"),
    ("Picture", "string"),
    ("Website", "string"),
    ("Email", "string"),
    ("EmailVerified", "bool"),
    ("Gender", "string"),
    ("Birthdate", "string"),
    ("ZoneInfo", "string"),
    ("Locale", "string"),
    ("Phone", "string"),
    ("PhoneVerified", "bool"),
    ("UpdatedAt", "string"),
]


# one attribute per CLAIM_FIELDS entry, named to_snake_case(logical name);
# adding a claim means touching both
@dataclass
class UserClaims:
    subject: str = ""
    issuer: str = ""
    name: str = ""
    given_name: str = ""
    family_name: str = ""
    middle_name: str = ""
    nick_name: str = ""
    preferred_username: str = ""
    profile: str = ""
    picture: str = ""
    website: str = ""
    email: str = ""
    email_verified: bool = False
    gender: str = ""
    birthdate: str = ""
    zone_info: str = ""
    locale: str = ""
    phone: str = ""
    phone_verified: bool = False
    updated_at: str = ""

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


_DEFAULTS = {f.name: f.default for f in fields(UserClaims)}


def map_user_claims(payload: Any, mapping: Optional[Mapping[str, str]] = None) -> UserClaims:
    """
    Build a UserClaims record from a decoded userinfo payload.

    Each claim is read from the path configured in `mapping` (or the
    snake_case default) and falls back to the record default when the
    payload does not carry it.
    """
    values: Dict[str, Any] = {}
    for logical, kind in CLAIM_FIELDS:
        attr = to_snake_case(logical)
        path = get_mapping_field(mapping, logical)
        if kind == "bool":
            values[attr] = get_boolean_field_by_path(payload, path, _DEFAULTS[attr])
        else:
            values[attr] = get_string_field_by_path(payload, path, _DEFAULTS[attr])
        _LOGGER.debug("claim %s <- %s = %r", logical, path, values[attr])

    claims = UserClaims(**values)
    if not claims.subject:
        raise MissingSubjectError(
            f"subject not found at {get_mapping_field(mapping, 'Subject')!r}"
        )
    return claims
