from dataclasses import dataclass

import boto3


@dataclass(frozen=True)
class AwsClients:
    """One client per external system, built once and passed to the handlers."""

    autoscaling: object
    ecs: object
    ec2: object
    route53: object

    @classmethod
    def create(cls, region: str | None = None) -> "AwsClients":
        return cls(
            autoscaling=boto3.client("autoscaling", region_name=region),
            ecs=boto3.client("ecs", region_name=region),
            ec2=boto3.client("ec2", region_name=region),
            route53=boto3.client("route53", region_name=region),
        )
