# appseed/channels.py

"""
Channel descriptors attached to an application record.

Each descriptor is encoded as a small document carrying an explicit "@type"
tag. Known tags decode to DevChannel / GuestChannel; anything else decodes to
UnknownChannel so that newer descriptors survive a read-modify-write.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Union
from .constants import DEV_CHANNEL_TYPE, GUEST_CHANNEL_TYPE
from .errors import RecordValidationError

TYPE_KEY = "@type"


@dataclass(frozen=True)
class DevChannel:
    type_url = DEV_CHANNEL_TYPE

    def to_dict(self) -> Dict[str, Any]:
        return {TYPE_KEY: self.type_url}


@dataclass(frozen=True)
class GuestChannel:
    can_transfer: bool = False

    type_url = GUEST_CHANNEL_TYPE

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {TYPE_KEY: self.type_url}
        if self.can_transfer:
            d["can_transfer"] = True
        return d


@dataclass(frozen=True)
class UnknownChannel:
    type_url: str
    fields: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        d = dict(self.fields)
        d[TYPE_KEY] = self.type_url
        return d


Channel = Union[DevChannel, GuestChannel, UnknownChannel]


def channel_from_dict(data: Dict[str, Any]) -> Channel:
    if not isinstance(data, dict):
        raise RecordValidationError(f"channel descriptor must be an object, got {type(data).__name__}")
    type_url = data.get(TYPE_KEY)
    if not isinstance(type_url, str) or not type_url:
        raise RecordValidationError("channel descriptor is missing '@type'")

    if type_url == DEV_CHANNEL_TYPE:
        return DevChannel()

    if type_url == GUEST_CHANNEL_TYPE:
        can_transfer = data.get("can_transfer", False)
        if not isinstance(can_transfer, bool):
            raise RecordValidationError("guest channel 'can_transfer' must be a boolean")
        return GuestChannel(can_transfer=can_transfer)

    rest = {k: v for k, v in data.items() if k != TYPE_KEY}
    return UnknownChannel(type_url=type_url, fields=rest)


def channels_to_dict(channels: Dict[str, Channel]) -> Dict[str, Dict[str, Any]]:
    return {name: ch.to_dict() for name, ch in channels.items()}


def channels_from_dict(data: Dict[str, Any]) -> Dict[str, Channel]:
    if not isinstance(data, dict):
        raise RecordValidationError("'channels' must be an object")
    out = {}
    for name, desc in data.items():
        if not isinstance(name, str) or not name:
            raise RecordValidationError("channel names must be non-empty strings")
        out[name] = channel_from_dict(desc)
    return out
