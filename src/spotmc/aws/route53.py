def upsert_a_record(route53, zone_id: str, record_name: str, ip: str, ttl: int = 60) -> dict:
    """Create or replace the A record for record_name. Idempotent on (zone, name, type)."""
    return route53.change_resource_record_sets(
        HostedZoneId=zone_id,
        ChangeBatch={
            "Comment": "Updating",
            "Changes": [{
                "Action": "UPSERT",
                "ResourceRecordSet": {
                    "Name": record_name,
                    "Type": "A",
                    "TTL": ttl,
                    "ResourceRecords": [{"Value": ip}],
                },
            }],
        },
    )


def get_a_record(route53, zone_id: str, record_name: str) -> dict | None:
    """Return {"name", "value", "ttl"} for the A record, or None if absent."""
    wanted = record_name.rstrip(".") + "."
    response = route53.list_resource_record_sets(
        HostedZoneId=zone_id,
        StartRecordName=record_name,
        StartRecordType="A",
    )
    for record_set in response.get("ResourceRecordSets", []):
        name = record_set["Name"].rstrip(".") + "."
        if name != wanted or record_set["Type"] != "A":
            continue
        records = record_set.get("ResourceRecords", [])
        return {
            "name": record_set["Name"],
            "value": records[0]["Value"] if records else None,
            "ttl": record_set.get("TTL"),
        }
    return None
