def get_instance_public_ip(ec2, instance_id: str) -> str | None:
    """Public address of an instance, or None if it has none (yet)."""
    response = ec2.describe_instances(InstanceIds=[instance_id])
    reservations = response.get("Reservations", [])
    if not reservations:
        return None
    instances = reservations[0].get("Instances", [])
    if instances:
        return instances[0].get("PublicIpAddress")
    return None
