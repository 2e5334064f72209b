from app.core.models import CamelCaseModel

class HealthCheckResponse(CamelCaseModel):
    status: str = "ok"
    storage_backend: str
