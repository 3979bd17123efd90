from types import SimpleNamespace
from unittest.mock import MagicMock

import boto3
import pytest
from botocore.exceptions import ClientError
from loguru import logger

from spotmc.config import DnsTarget, FleetRef, ServiceRef


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "uses_moto: test uses moto @mock_aws (allows boto3 calls)"
    )


@pytest.fixture(autouse=True)
def _block_real_aws(request, monkeypatch):
    """Prevent any test from making real AWS API calls."""
    if request.node.get_closest_marker("uses_moto"):
        return

    def _blocked_client(service, *a, **kw):
        raise RuntimeError(
            f"Unmocked boto3.client('{service}') call! "
            f"Inject a MagicMock client or use moto for this AWS call."
        )

    def _blocked_resource(service, *a, **kw):
        raise RuntimeError(
            f"Unmocked boto3.resource('{service}') call! "
            f"Inject a MagicMock client or use moto for this AWS call."
        )

    monkeypatch.setattr(boto3, "client", _blocked_client)
    monkeypatch.setattr(boto3, "resource", _blocked_resource)


@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake credentials so moto-backed clients never look for real ones."""
    for key, value in {
        "AWS_ACCESS_KEY_ID": "testing",
        "AWS_SECRET_ACCESS_KEY": "testing",
        "AWS_SESSION_TOKEN": "testing",
        "AWS_DEFAULT_REGION": "us-east-1",
    }.items():
        monkeypatch.setenv(key, value)


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during the test."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def make_client_error():
    """Factory for botocore ClientError."""
    def _make(code: str, message: str = "error"):
        return ClientError({"Error": {"Code": code, "Message": message}}, "TestOp")
    return _make


@pytest.fixture
def fake_clients():
    """MagicMock stand-ins for every injected client.

    describe_instances resolves to 1.2.3.4 by default; override
    .ec2.describe_instances.return_value / side_effect per test.
    """
    ec2 = MagicMock()
    ec2.describe_instances.return_value = {
        "Reservations": [{"Instances": [{"InstanceId": "i-abc", "PublicIpAddress": "1.2.3.4"}]}],
    }
    return SimpleNamespace(
        autoscaling=MagicMock(), ecs=MagicMock(), ec2=ec2, route53=MagicMock(),
    )


@pytest.fixture
def fleet():
    return FleetRef("asg-1")


@pytest.fixture
def service():
    return ServiceRef(cluster="cluster-1", service="svc-1")


@pytest.fixture
def dns_target():
    return DnsTarget(zone_id="Z1", record_name="mc.example.com")
