"""Environment driven settings for :class:`~talentlms_api_client.TalentLmsClient`."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class TalentLmsSettings(BaseSettings):
    """Connection settings read from ``TALENTLMS_*`` environment variables.

    Only the raw values are loaded here.  Whether the combination is
    usable (an API key plus a domain or subdomain) is checked by the
    client constructor.
    """

    model_config = SettingsConfigDict(
        env_prefix="TALENTLMS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = ""
    domain: Optional[str] = None
    subdomain: Optional[str] = None
    timeout_seconds: Optional[float] = None
