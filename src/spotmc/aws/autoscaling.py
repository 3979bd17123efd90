def update_fleet_capacity(
    autoscaling, group_name: str, desired: int, min_size: int, max_size: int,
) -> dict:
    """Set desired/min/max on an Auto Scaling group. Always sent, never diffed."""
    return autoscaling.update_auto_scaling_group(
        AutoScalingGroupName=group_name,
        DesiredCapacity=desired,
        MinSize=min_size,
        MaxSize=max_size,
    )


def describe_fleet_capacity(autoscaling, group_name: str) -> dict | None:
    response = autoscaling.describe_auto_scaling_groups(
        AutoScalingGroupNames=[group_name],
    )
    groups = response.get("AutoScalingGroups", [])
    if not groups:
        return None
    group = groups[0]
    return {
        "desired": group["DesiredCapacity"],
        "min": group["MinSize"],
        "max": group["MaxSize"],
    }
