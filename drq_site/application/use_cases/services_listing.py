"""Services listing: catalog services enriched with features and process steps."""

from drq_site.application.dtos.intake import ProcessStep, ServiceDetail
from drq_site.infrastructure.catalog import data


def _process_steps(specific: list[str]) -> list[ProcessStep]:
    return [
        ProcessStep(
            step=index,
            title=specific[index - 1] if index <= len(specific) else title,
            description=description,
        )
        for index, (title, description) in enumerate(data.COMMON_PROCESS_STEPS, start=1)
    ]


def list_services() -> list[ServiceDetail]:
    """Every service with common plus service-specific features."""
    return [
        ServiceDetail(
            id=s["id"],
            name=s["title"],
            description=s["description"],
            href=f"/services/{s['id']}",
            features=[*data.COMMON_SERVICE_FEATURES, *s["features"]],
            process=_process_steps(s["steps"]),
            emergency_available=s["emergency"],
            response_time=s["response_time"],
        )
        for s in data.SERVICES
    ]
