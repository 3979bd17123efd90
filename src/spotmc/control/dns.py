from loguru import logger
from pydantic import ValidationError

from spotmc.aws.ec2 import get_instance_public_ip
from spotmc.aws.route53 import upsert_a_record
from spotmc.config import DnsTarget
from spotmc.control.events import LaunchEvent
from spotmc.control.result import EXTERNAL_ERRORS, Fault, FaultKind, InvocationResult


class DnsSynchronizer:
    """Point the server's A record at a newly launched instance.

    Last write wins; out-of-order launch events are not detected.
    """

    def __init__(self, ec2, route53, target: DnsTarget):
        self.ec2 = ec2
        self.route53 = route53
        self.target = target

    def handle(self, event, ack: str = "") -> InvocationResult:
        result = InvocationResult(ack=ack)
        try:
            launch = LaunchEvent.model_validate(event)
        except ValidationError as e:
            logger.error("Rejecting malformed launch event {!r}: {}", event, e)
            result.faults.append(Fault(
                kind=FaultKind.MALFORMED_EVENT, action="parse-event", message=str(e),
            ))
            return result

        if not self.target.complete:
            logger.warning(
                "Missing parameter: zone={!r} record={!r}, skipping DNS update for {}",
                self.target.zone_id, self.target.record_name, launch.instance_id,
            )
            result.skipped.append("dns-upsert")
            return result

        try:
            ip = get_instance_public_ip(self.ec2, launch.instance_id)
        except EXTERNAL_ERRORS as e:
            fault = Fault.from_exception("instance-lookup", e)
            logger.error("Lookup of instance {} failed ({}): {}", launch.instance_id, fault.code, e)
            result.faults.append(fault)
            return result
        result.calls.append("instance-lookup")

        if not ip:
            logger.warning(
                "Missing parameter: instance {} has no public address, skipping DNS update",
                launch.instance_id,
            )
            result.skipped.append("dns-upsert")
            return result

        try:
            upsert_a_record(
                self.route53, self.target.zone_id, self.target.record_name, ip,
                ttl=self.target.ttl,
            )
        except EXTERNAL_ERRORS as e:
            fault = Fault.from_exception("dns-upsert", e)
            logger.error(
                "Upsert of {} -> {} failed ({}): {}", self.target.record_name, ip, fault.code, e,
            )
            result.faults.append(fault)
            return result

        logger.info("Pointed {} at {} ({})", self.target.record_name, ip, launch.instance_id)
        result.calls.append("dns-upsert")
        return result
