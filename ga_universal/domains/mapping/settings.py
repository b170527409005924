"""Per-integration settings."""

from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class IntegrationSettings(BaseModel):
    """Settings for one Google Analytics destination.

    Accepts the camelCase keys used by the control plane as well as the
    snake_case field names. Keys belonging to other integrations (e.g.
    ``serversideClassic``) are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    serverside_tracking_id: Optional[str] = Field(None, alias="serversideTrackingId")
    mobile_tracking_id: Optional[str] = Field(None, alias="mobileTrackingId")
    send_user_id: bool = Field(False, alias="sendUserId")
    non_interaction: bool = Field(False, alias="nonInteraction")
    enhanced_ecommerce: bool = Field(False, alias="enhancedEcommerce")
    dimensions: Dict[str, Any] = Field(
        default_factory=dict, description="Semantic name -> 'dimension<N>'"
    )
    metrics: Dict[str, Any] = Field(default_factory=dict, description="Semantic name -> 'metric<N>'")

    @field_validator("serverside_tracking_id", "mobile_tracking_id", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        """Treat empty or whitespace-only ids as unset."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("dimensions", "metrics", mode="before")
    @classmethod
    def none_to_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @classmethod
    def coerce(cls, value: Union["IntegrationSettings", Mapping[str, Any]]) -> "IntegrationSettings":
        """Return ``value`` as settings, validating a raw mapping if needed."""
        if isinstance(value, cls):
            return value
        return cls.model_validate(dict(value))
