from loguru import logger
from pydantic import ValidationError

from spotmc.aws.autoscaling import update_fleet_capacity
from spotmc.aws.ecs import update_service_desired_count
from spotmc.config import FleetRef, ServiceRef
from spotmc.control.events import CapacityEvent
from spotmc.control.result import EXTERNAL_ERRORS, Fault, FaultKind, InvocationResult
from spotmc.control.state import ServerState, capacity_target


class CapacityController:
    """Apply the requested server state to the fleet and the service on top of it.

    Every event issues a full write; current capacity is never read first.
    The fleet and service writes are independent: either may fail without
    stopping the other, and nothing is rolled back.
    """

    def __init__(
        self, autoscaling, ecs, fleet: FleetRef | None,
        service: ServiceRef | None = None, bounds: str = "pinned",
    ):
        self.autoscaling = autoscaling
        self.ecs = ecs
        self.fleet = fleet
        self.service = service
        self.bounds = bounds

    def handle(self, event, ack: str = "") -> InvocationResult:
        result = InvocationResult(ack=ack)
        try:
            request = CapacityEvent.model_validate(event)
        except ValidationError as e:
            logger.error("Rejecting malformed capacity event {!r}: {}", event, e)
            result.faults.append(Fault(
                kind=FaultKind.MALFORMED_EVENT, action="parse-event", message=str(e),
            ))
            return result

        state = ServerState.from_status(request.status)
        if request.status not in (s.value for s in ServerState):
            logger.warning("Unrecognized status {!r}, treating as {}", request.status, state.value)
        target = capacity_target(state, self.bounds)

        if self.fleet is None:
            logger.warning("Missing parameter: no fleet configured, skipping capacity update")
            result.skipped.append("fleet-update")
            return result

        try:
            update_fleet_capacity(
                self.autoscaling, self.fleet.name,
                desired=target.desired, min_size=target.min, max_size=target.max,
            )
            logger.info(
                "Fleet {} set to desired={} min={} max={}",
                self.fleet.name, target.desired, target.min, target.max,
            )
            result.calls.append("fleet-update")
        except EXTERNAL_ERRORS as e:
            fault = Fault.from_exception("fleet-update", e)
            logger.error("Fleet update for {} failed ({}): {}", self.fleet.name, fault.code, e)
            result.faults.append(fault)

        if self.service is None:
            return result

        try:
            update_service_desired_count(
                self.ecs, self.service.cluster, self.service.service, target.desired,
            )
            logger.info(
                "Service {}/{} set to desired={}",
                self.service.cluster, self.service.service, target.desired,
            )
            result.calls.append("service-update")
        except EXTERNAL_ERRORS as e:
            fault = Fault.from_exception("service-update", e)
            logger.error(
                "Service update for {}/{} failed ({}): {}",
                self.service.cluster, self.service.service, fault.code, e,
            )
            result.faults.append(fault)

        return result
