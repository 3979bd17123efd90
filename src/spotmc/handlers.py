"""Event-source entrypoints.

Settings and clients are built on the first invocation of a process and
reused afterwards; each invocation gets a fresh controller. A result with
faults is raised as InvocationFailed so the event source can redeliver.
"""
from dataclasses import dataclass
from functools import cache

from loguru import logger

from spotmc.aws.clients import AwsClients
from spotmc.config import Settings, configure_logging
from spotmc.control.capacity import CapacityController
from spotmc.control.dns import DnsSynchronizer
from spotmc.control.result import InvocationFailed, InvocationResult


@dataclass(frozen=True)
class Runtime:
    settings: Settings
    clients: AwsClients


@cache
def runtime() -> Runtime:
    settings = Settings.from_env()
    configure_logging(settings)
    return Runtime(settings=settings, clients=AwsClients.create(settings.region))


def _ack(context) -> str:
    return getattr(context, "log_stream_name", "") or ""


def _finish(result: InvocationResult) -> str:
    if not result.ok:
        raise InvocationFailed(result)
    return result.ack


def capacity_handler(event, context):
    rt = runtime()
    ack = _ack(context)
    controller = CapacityController(
        rt.clients.autoscaling, rt.clients.ecs,
        fleet=rt.settings.fleet, service=rt.settings.service,
        bounds=rt.settings.capacity_bounds,
    )
    with logger.contextualize(ack=ack):
        return _finish(controller.handle(event, ack=ack))


def dns_handler(event, context):
    rt = runtime()
    ack = _ack(context)
    synchronizer = DnsSynchronizer(rt.clients.ec2, rt.clients.route53, rt.settings.dns)
    with logger.contextualize(ack=ack):
        return _finish(synchronizer.handle(event, ack=ack))
