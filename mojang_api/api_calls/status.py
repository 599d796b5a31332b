from mojang_api.core.config import Settings
from mojang_api.models import ServiceStatus
from mojang_api.result_collections import ServiceStatusCollection
from mojang_api.schemas import StatusCheckResponse
from mojang_api.utils.decoding import decode_json, parse_as
from mojang_api.utils.http import HttpTransport
from mojang_api.utils.logging_config import get_logger

logger = get_logger("status")


def fetch_service_status(transport: HttpTransport, settings: Settings) -> ServiceStatusCollection:
    """
    Fetch the status of every Mojang service.

    The response is a list of single-key objects; every key/value pair
    becomes one ServiceStatus, in response order.
    """
    try:
        resp = transport.get(f"{settings.STATUS_HOST}/check")
        data = parse_as(StatusCheckResponse, decode_json(resp), "status check")
    except Exception:
        logger.exception("Status check failed")
        raise

    services = ServiceStatusCollection()
    for entry in data:
        for name, status in entry.items():
            services.add(ServiceStatus(name=name, status=status))

    logger.info(f"Status received services={services.count()}")
    return services
