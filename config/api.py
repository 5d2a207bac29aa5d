"""Django Ninja API configuration."""

from django.conf import settings
from ninja import NinjaAPI

from core.utils.config import get_setting
from features.analytics.endpoints import router as analytics_router
from features.goals.endpoints import router as goals_router

# Create the main API instance
api = NinjaAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description="Goal progress, status and profit & loss evaluation for the business dashboard",
)

# Register routers
api.add_router("/goals", goals_router, tags=["Goals"])
api.add_router("/analytics", analytics_router, tags=["Analytics"])


@api.get("/health", tags=["Health"])
def health(request):
    return {"status": "healthy", "service": get_setting().SERVICE_NAME}
