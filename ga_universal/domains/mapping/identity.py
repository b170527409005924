"""Client and tracking id resolution."""

from typing import Any, Mapping, Optional, Union

from ga_universal.domains.events import Facade
from ga_universal.domains.mapping.settings import IntegrationSettings

INTEGRATION_NAME = "Google Analytics"

MOBILE_LIBRARIES = ("ios", "android", "analytics.xamarin")

_HASH_SEED = 5381
_UINT32 = 0xFFFFFFFF


def string_hash(value: str) -> int:
    """Hash ``value`` to an unsigned 32-bit int (djb2, xor variant).

    Walks the UTF-16 code units from the end, so ids match the ones
    produced by the JavaScript libraries for the same identity. Lone
    surrogates are hashed as the code units they are.
    """
    data = value.encode("utf-16-le", "surrogatepass")
    result = _HASH_SEED
    for offset in range(len(data) - 2, -1, -2):
        unit = data[offset] | (data[offset + 1] << 8)
        result = ((result * 33) ^ unit) & _UINT32
    return result


def client_id(event: Facade) -> Union[int, str]:
    """Return the per-call ``clientId`` override, else the identity hash."""
    options = event.options(INTEGRATION_NAME) or {}
    override = options.get("clientId")
    if isinstance(override, str):
        return override
    identity = event.user_id() or event.anonymous_id() or ""
    return string_hash(str(identity))


def library_name(library: Any) -> Optional[str]:
    if isinstance(library, str):
        return library
    if isinstance(library, Mapping) and isinstance(library.get("name"), str):
        return library["name"]
    return None


def is_mobile(library: Any) -> bool:
    """Whether the call was made directly by a mobile SDK (iOS, Android, Xamarin)."""
    name = library_name(library)
    if not name:
        return False
    name = name.lower()
    return any(marker in name for marker in MOBILE_LIBRARIES)


def tracking_id(event: Facade, settings: IntegrationSettings) -> Optional[str]:
    """Pick the mobile property for mobile SDK calls when one is configured."""
    if is_mobile(event.library()) and settings.mobile_tracking_id:
        return settings.mobile_tracking_id
    return settings.serverside_tracking_id
