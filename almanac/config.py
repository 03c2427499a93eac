"""Configuration for Almanac.

The only setting is the timezone given to Instants constructed without an
explicit one. It is carried in an immutable Config value that callers can
pass to any constructor via ``config=``. When they do not, the process
default from :func:`default_config` is used; it is built once from the
environment and never mutated afterwards.

Environment:
    ALMANAC_TIMEZONE: "UTC", "Z", "+08:00", "-0500", ... When unset, the
        host's current local UTC offset is used.
"""

from __future__ import annotations

import functools
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from almanac._internal.constants import TIMEZONE_ENV_VAR
from almanac.units.timezone import Timezone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    """Settings threaded through Instant construction.

    Attributes:
        default_timezone: Timezone for Instants built without one.
    """

    default_timezone: Timezone = field(default_factory=Timezone.utc)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        """Build a Config from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Raises:
            TimezoneError: If ALMANAC_TIMEZONE is set but unparseable.
        """
        env = os.environ if environ is None else environ
        raw = env.get(TIMEZONE_ENV_VAR, "").strip()
        if raw:
            timezone = Timezone.from_string(raw)
            logger.debug("default timezone %s from %s", timezone, TIMEZONE_ENV_VAR)
        else:
            timezone = Timezone.local()
            logger.debug("default timezone %s from host local offset", timezone)
        return cls(default_timezone=timezone)


@functools.lru_cache(maxsize=None)
def default_config() -> Config:
    """Return the process-wide default Config, built once from the environment."""
    return Config.from_env()


def resolve_timezone(timezone: Timezone | None, config: Config | None) -> Timezone:
    """Pick the timezone for a new Instant.

    An explicit timezone wins; otherwise the given config's default, and
    finally the process default.
    """
    if timezone is not None:
        return timezone
    return (config or default_config()).default_timezone


__all__ = [
    "Config",
    "default_config",
    "resolve_timezone",
]
