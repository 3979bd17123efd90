import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass

from loguru import logger


DEFAULT_DNS_TTL = 60
CAPACITY_BOUNDS = ("pinned", "elastic")


@dataclass(frozen=True)
class FleetRef:
    name: str


@dataclass(frozen=True)
class ServiceRef:
    cluster: str
    service: str


@dataclass(frozen=True)
class DnsTarget:
    zone_id: str | None
    record_name: str | None
    ttl: int = DEFAULT_DNS_TTL

    @property
    def complete(self) -> bool:
        return bool(self.zone_id and self.record_name)


@dataclass(frozen=True)
class Settings:
    """Deployment-time bindings, read once at process start."""

    fleet: FleetRef | None = None
    service: ServiceRef | None = None
    dns: DnsTarget = DnsTarget(zone_id=None, record_name=None)
    capacity_bounds: str = "pinned"
    region: str | None = None
    log_level: str = "INFO"
    log_json: bool = False

    def __post_init__(self):
        if self.capacity_bounds not in CAPACITY_BOUNDS:
            raise ValueError(
                f"capacityBounds must be one of {', '.join(CAPACITY_BOUNDS)}, "
                f"got {self.capacity_bounds!r}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ

        def get(key: str) -> str | None:
            value = env.get(key, "").strip()
            return value or None

        fleet_name = get("autoScalingGroup")
        cluster, service = get("ecsCluster"), get("ecsService")
        ttl = get("dnsTtl")
        try:
            ttl_seconds = int(ttl) if ttl else DEFAULT_DNS_TTL
        except ValueError:
            raise ValueError(f"dnsTtl must be an integer, got {ttl!r}") from None

        return cls(
            fleet=FleetRef(fleet_name) if fleet_name else None,
            service=ServiceRef(cluster, service) if cluster and service else None,
            dns=DnsTarget(
                zone_id=get("hostedZoneId"),
                record_name=get("recordName"),
                ttl=ttl_seconds,
            ),
            capacity_bounds=get("capacityBounds") or "pinned",
            region=get("AWS_REGION") or get("AWS_DEFAULT_REGION"),
            log_level=(get("LOG_LEVEL") or "INFO").upper(),
            log_json=(get("LOG_JSON") or "").lower() in ("1", "true", "yes"),
        )


def configure_logging(settings: Settings) -> None:
    """Route loguru to a single stderr sink at the configured level."""
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level, serialize=settings.log_json)
