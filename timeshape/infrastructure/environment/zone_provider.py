from __future__ import annotations

from collections.abc import Iterator, Mapping
import os
from pathlib import Path
from typing import override

from ...application.ports.services import LoggerPort, ZoneProviderPort
from ...constants import Defaults, EnvVars
from ...domain.services.transformers.zone import is_known_zone, resolve_zone
from ..logging.logging_config import get_logger

_ZONEINFO_MARKER = "zoneinfo/"


class EnvironmentZoneProvider(ZoneProviderPort):
    """Reads the host's configured timezone on every call.

    Sources, in order: the ``TZ`` variable, ``/etc/timezone``, and the target
    of the ``/etc/localtime`` link. When none yields a known identifier the
    fallback zone is returned.
    """

    def __init__(
        self,
        fallback_zone: str = Defaults.FALLBACK_ZONE,
        *,
        environ: Mapping[str, str] | None = None,
        timezone_file: Path = Path("/etc/timezone"),
        localtime_path: Path = Path("/etc/localtime"),
        logger: LoggerPort | None = None,
    ) -> None:
        super().__init__()
        resolve_zone(fallback_zone)
        self.fallback_zone = fallback_zone
        self._environ = environ
        self._timezone_file = timezone_file
        self._localtime_path = localtime_path
        self._logger = logger

    @override
    def default_zone(self) -> str:
        logger = self._logger or get_logger()
        for source, candidate in self._candidates():
            if is_known_zone(candidate):
                return candidate
            logger.debug(f"Ignoring unknown timezone {candidate!r} from {source}")
        logger.debug(
            f"Environment timezone unavailable; using {self.fallback_zone}"
        )
        return self.fallback_zone

    def _candidates(self) -> Iterator[tuple[str, str]]:
        environ = self._environ if self._environ is not None else os.environ
        if raw := environ.get(EnvVars.TZ, "").strip():
            yield EnvVars.TZ, _zone_from_path(raw.removeprefix(":"))
        if candidate := self._read_timezone_file():
            yield str(self._timezone_file), candidate
        if candidate := self._read_localtime_link():
            yield str(self._localtime_path), candidate

    def _read_timezone_file(self) -> str | None:
        try:
            lines = self._timezone_file.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError):
            return None
        for line in lines:
            if stripped := line.strip():
                return stripped
        return None

    def _read_localtime_link(self) -> str | None:
        try:
            if not self._localtime_path.is_symlink():
                return None
            target = str(self._localtime_path.resolve())
        except OSError:
            return None
        if _ZONEINFO_MARKER not in target:
            return None
        return _zone_from_path(target)


class FixedZoneProvider(ZoneProviderPort):
    pass

    def __init__(self, zone: str) -> None:
        super().__init__()
        resolve_zone(zone)
        self.zone = zone

    @override
    def default_zone(self) -> str:
        return self.zone


def _zone_from_path(value: str) -> str:
    if _ZONEINFO_MARKER in value:
        value = value.rsplit(_ZONEINFO_MARKER, 1)[1]
        for prefix in ("posix/", "right/"):
            value = value.removeprefix(prefix)
    return value
