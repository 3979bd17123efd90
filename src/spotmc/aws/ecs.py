def update_service_desired_count(ecs, cluster: str, service: str, desired: int) -> dict:
    return ecs.update_service(cluster=cluster, service=service, desiredCount=desired)


def describe_service_desired_count(ecs, cluster: str, service: str) -> int | None:
    response = ecs.describe_services(cluster=cluster, services=[service])
    services = response.get("services", [])
    if not services:
        return None
    return services[0]["desiredCount"]
