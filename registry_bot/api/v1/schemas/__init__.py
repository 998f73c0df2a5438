from .health_schemas import HealthResponse
from .webhook_schemas import WebhookAck

__all__ = ["HealthResponse", "WebhookAck"]
