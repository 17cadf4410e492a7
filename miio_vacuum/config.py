"""Runtime configuration for vacuum devices."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Any

import voluptuous as vol
import yaml

CONF_REFRESH_DELAY = "refresh_delay"
CONF_SETTING_REFRESH_DELAY = "setting_refresh_delay"
CONF_CHARGE_SETTLE_DELAY = "charge_settle_delay"
CONF_MONITOR_INTERVAL = "monitor_interval"
CONF_STATUS_METHOD = "status_method"
CONF_CONSUMABLE_METHOD = "consumable_method"
CONF_GATEWAY_URL = "gateway_url"

_MILLISECONDS = vol.All(vol.Coerce(int), vol.Range(min=0))

CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_REFRESH_DELAY, default=1000): _MILLISECONDS,
        vol.Optional(CONF_SETTING_REFRESH_DELAY, default=50): _MILLISECONDS,
        vol.Optional(CONF_CHARGE_SETTLE_DELAY, default=1000): _MILLISECONDS,
        vol.Optional(CONF_MONITOR_INTERVAL, default=60000): vol.All(
            vol.Coerce(int), vol.Range(min=1)
        ),
        vol.Optional(CONF_STATUS_METHOD, default="get_status"): str,
        vol.Optional(CONF_CONSUMABLE_METHOD, default="get_consumable"): str,
        vol.Optional(CONF_GATEWAY_URL): vol.Url(),
    }
)


@dataclass(frozen=True, slots=True)
class VacuumConfig:
    """Timing and method settings for one vacuum."""

    refresh_delay: timedelta = timedelta(seconds=1)
    setting_refresh_delay: timedelta = timedelta(milliseconds=50)
    charge_settle_delay: timedelta = timedelta(seconds=1)
    monitor_interval: timedelta = timedelta(seconds=60)
    status_method: str = "get_status"
    consumable_method: str = "get_consumable"
    gateway_url: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> VacuumConfig:
        """Validate ``data`` and build a config; delays are milliseconds."""

        settings = CONFIG_SCHEMA(dict(data or {}))
        return cls(
            refresh_delay=timedelta(milliseconds=settings[CONF_REFRESH_DELAY]),
            setting_refresh_delay=timedelta(
                milliseconds=settings[CONF_SETTING_REFRESH_DELAY]
            ),
            charge_settle_delay=timedelta(
                milliseconds=settings[CONF_CHARGE_SETTLE_DELAY]
            ),
            monitor_interval=timedelta(milliseconds=settings[CONF_MONITOR_INTERVAL]),
            status_method=settings[CONF_STATUS_METHOD],
            consumable_method=settings[CONF_CONSUMABLE_METHOD],
            gateway_url=settings.get(CONF_GATEWAY_URL),
        )


def load_config(path: Path) -> VacuumConfig:
    """Read a YAML config file."""

    with path.open("r", encoding="utf-8") as fp:
        payload = yaml.safe_load(fp)
    return VacuumConfig.from_dict(payload)
