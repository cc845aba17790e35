"""Records loaded from configuration files and the lock database."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


def _require_mapping(data: Any, what: str) -> dict:
    if not isinstance(data, dict):
        raise ValueError(f"{what}: expected an object, got {type(data).__name__}")
    return data


def _required_str(data: dict, key: str, what: str) -> str:
    if key not in data:
        raise ValueError(f"{what}: missing field {key!r}")
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"{what}: field {key!r} must be a string")
    return value


def _optional(data: dict, key: str, kind: type, what: str) -> Any:
    value = data.get(key)
    if value is None:
        return None
    if type(value) is not kind:
        raise ValueError(f"{what}: field {key!r} must be of type {kind.__name__}")
    return value


def _optional_list(data: dict, key: str, parse, what: str) -> list | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise ValueError(f"{what}: field {key!r} must be a list")
    return [parse(item) for item in value]


@dataclass(frozen=True)
class Application:
    id: int
    name: str
    action: str


@dataclass(frozen=True)
class LockAdd:
    hash: str


@dataclass(frozen=True)
class Lock:
    id: int
    hash: str
    timestamp: datetime


@dataclass(frozen=True)
class Script:
    bin: str

    @classmethod
    def from_data(cls, data: Any) -> Script:
        mapping = _require_mapping(data, "script")
        return cls(bin=_required_str(mapping, "bin", "script"))


@dataclass(frozen=True)
class DotConfig:
    dest: str
    content: str | None = None
    src: str | None = None

    @classmethod
    def from_data(cls, data: Any) -> DotConfig:
        mapping = _require_mapping(data, "dot config")
        return cls(
            dest=_required_str(mapping, "dest", "dot config"),
            content=_optional(mapping, "content", str, "dot config"),
            src=_optional(mapping, "src", str, "dot config"),
        )


@dataclass(frozen=True)
class Package:
    """A package given either by name alone or with extra settings."""

    name: str
    enabled: bool | None = None
    aur: bool | None = None
    dot_configs: list[DotConfig] | None = None
    pre_script: list[Script] | None = None
    post_script: list[Script] | None = None

    @property
    def is_enabled(self) -> bool:
        return bool(self.enabled)

    @property
    def is_aur(self) -> bool:
        return bool(self.aur)

    @classmethod
    def from_data(cls, data: Any) -> Package:
        if isinstance(data, str):
            return cls(name=data)
        if not isinstance(data, dict):
            raise ValueError("package: expected a name or an object")
        what = "package"
        return cls(
            name=_required_str(data, "name", what),
            enabled=_optional(data, "enabled", bool, what),
            aur=_optional(data, "aur", bool, what),
            dot_configs=_optional_list(data, "dot_configs", DotConfig.from_data, what),
            pre_script=_optional_list(data, "pre_script", Script.from_data, what),
            post_script=_optional_list(data, "post_script", Script.from_data, what),
        )


@dataclass
class ConfigFile:
    packages: list[Package] = field(default_factory=list)

    @classmethod
    def from_data(cls, data: Any) -> ConfigFile:
        mapping = _require_mapping(data, "config")
        if "packages" not in mapping:
            raise ValueError("config: missing field 'packages'")
        packages = mapping["packages"]
        if not isinstance(packages, list):
            raise ValueError("config: field 'packages' must be a list")
        return cls(packages=[Package.from_data(item) for item in packages])

    @classmethod
    def merged(cls, configs) -> ConfigFile:
        """Join the packages of all *configs* in order."""
        return cls(packages=[package for config in configs for package in config.packages])