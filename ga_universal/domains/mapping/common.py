"""Fields shared by every hit type.

https://developers.google.com/analytics/devguides/collection/protocol/v1/parameters
"""

import re
from typing import Any, Dict, Iterable, Mapping, Optional

from ga_universal.domains.events import Facade, lookup
from ga_universal.domains.mapping.identity import client_id, tracking_id
from ga_universal.domains.mapping.settings import IntegrationSettings

Payload = Dict[str, Any]

PROTOCOL_VERSION = 1

_METRIC = re.compile(r"^metric(\d+)$")
_DIMENSION = re.compile(r"^dimension(\d+)$")

_CAMPAIGN_FIELDS = (("name", "cn"), ("source", "cs"), ("medium", "cm"), ("content", "cc"))
_APP_FIELDS = (("name", "an"), ("version", "av"), ("appId", "aid"), ("appInstallerId", "aiid"))


def shorten(name: Any) -> Optional[str]:
    """Shorten ``metric<N>`` / ``dimension<N>`` to ``cm<N>`` / ``cd<N>``.

    Example:
        shorten("metric99")     # => "cm99"
        shorten("dimension57")  # => "cd57"
        shorten("revenue")      # => None
    """
    if not isinstance(name, str):
        return None
    match = _METRIC.match(name)
    if match:
        return f"cm{match.group(1)}"
    match = _DIMENSION.match(name)
    if match:
        return f"cd{match.group(1)}"
    return None


def _semantic_names(settings: IntegrationSettings) -> Iterable[str]:
    seen = dict.fromkeys(settings.metrics)
    seen.update(dict.fromkeys(settings.dimensions))
    return seen.keys()


def resolve_custom_definitions(
    source: Mapping[str, Any], settings: IntegrationSettings
) -> Payload:
    """Map the custom metrics and dimensions found in ``source``.

    Example:
        resolve_custom_definitions({"revenue": 1.9}, IntegrationSettings(metrics={"revenue": "metric8"}))
        # => {"cm8": 1.9}
    """
    form: Payload = {}
    for name in _semantic_names(settings):
        key = shorten(settings.metrics.get(name) or settings.dimensions.get(name))
        if key is None:
            continue
        value = lookup(source, name)
        if value is None:
            continue
        form[key] = value
    return form


def custom_definitions(event: Facade, settings: IntegrationSettings) -> Payload:
    """Custom metrics and dimensions from the event's traits and properties."""
    form: Payload = {}
    # Traits are applied first and properties second, so a property value
    # replaces a trait value mapped to the same field.
    for source in (event.traits(), event.properties()):
        form.update(resolve_custom_definitions(source, settings))
    return form


def _copy_fields(block: Any, fields: Iterable[tuple], form: Payload) -> None:
    if not isinstance(block, Mapping):
        return
    for source, target in fields:
        value = lookup(block, source)
        if value:
            form[target] = value


def common_form(event: Facade, settings: IntegrationSettings) -> Payload:
    """Build the fields every hit carries.

    ``cid``, ``tid`` and ``v`` are always set (``tid`` only when a tracking
    id is configured); everything else only when the event has a value.
    """
    form = custom_definitions(event, settings)
    form["cid"] = client_id(event)
    tid = tracking_id(event, settings)
    if tid:
        form["tid"] = tid
    form["v"] = PROTOCOL_VERSION

    _copy_fields(event.proxy("context.campaign"), _CAMPAIGN_FIELDS, form)

    screen = event.proxy("context.screen")
    if isinstance(screen, Mapping) and screen.get("width") and screen.get("height"):
        form["sr"] = f"{screen['width']}x{screen['height']}"

    locale = event.proxy("context.locale")
    if locale:
        form["ul"] = locale

    _copy_fields(event.proxy("context.app"), _APP_FIELDS, form)

    user_id = event.user_id()
    if settings.send_user_id and user_id:
        form["uid"] = user_id

    user_agent = event.user_agent()
    if user_agent:
        form["ua"] = user_agent

    ip = event.ip()
    if ip:
        form["uip"] = ip

    return form
