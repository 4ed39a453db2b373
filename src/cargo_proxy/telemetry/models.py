"""Pydantic models for system and history logs.

The 'time' field is Optional[str] = None in every model: instances are
created without timestamps and ISO8601Formatter adds one during
serialization.
"""

from __future__ import annotations

__all__ = [
    "ProxyHistoryEvent",
    "SystemEvent",
]

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class SystemEvent(BaseModel):
    """One system log entry (system.jsonl).

    Used for problems worth keeping: parse fallbacks, failed writes,
    structure errors.
    """

    time: Optional[str] = Field(
        None,
        description="ISO 8601 timestamp, added by formatter during serialization",
    )
    event: str
    message: Optional[str] = None
    command: Optional[str] = None
    config_path: Optional[str] = None
    error_type: Optional[str] = None
    error_message: Optional[str] = None

    model_config = ConfigDict(extra="forbid")


class ProxyHistoryEvent(BaseModel):
    """One proxy history entry (proxy_history.jsonl).

    Records every change this tool makes to Cargo's config so that a
    previous mirror can be found again, together with the backup that
    holds the old file.
    """

    time: Optional[str] = Field(
        None,
        description="ISO 8601 timestamp, added by formatter during serialization",
    )
    event: Literal["proxy_set", "proxy_cleared"]
    message: Optional[str] = None

    config_path: str
    backup_path: Optional[str] = None

    previous_proxy: Optional[str] = None
    new_proxy: Optional[str] = None
    new_url: Optional[str] = None

    checksum_before: Optional[str] = None
    checksum_after: Optional[str] = None

    model_config = ConfigDict(extra="forbid")
