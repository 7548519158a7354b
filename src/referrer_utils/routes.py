"""
FastAPI routes for inspecting referrer classification.

Mount them on an admin prefix:

    app.include_router(create_referrer_router(config), prefix="/admin/referrer")
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request

from .config import ReferrerConfig
from .context import RequestContext, use_context
from .exceptions import UnknownOptionGroupError
from .models import OptionItem, ReferrerReport
from .options import OptionRegistry, default_registry
from .referrer import get_referrer_info

logger = logging.getLogger(__name__)


def create_referrer_router(
    config: ReferrerConfig | None = None,
    registry: OptionRegistry | None = None,
) -> APIRouter:
    """Create the referrer inspection router."""
    router = APIRouter()
    config = config or ReferrerConfig()
    registry = registry or default_registry

    @router.get("/referrer", response_model=ReferrerReport)
    async def referrer_report(
        request: Request,
        url: Optional[str] = Query(None, description="Referrer to classify instead of the request's"),
    ):
        """Classify the request's referrer, or the given URL."""
        with use_context(RequestContext(request, config)):
            info = get_referrer_info(url)
        return ReferrerReport.from_info(info)

    @router.get("/options/{group}", response_model=list[OptionItem])
    async def option_list(group: str, context: Optional[str] = None):
        """Value/label pairs for search_engine, social_platform or traffic_source."""
        try:
            return registry.get_options(group, as_value_label=True, context=context)
        except UnknownOptionGroupError:
            logger.debug(f"Requested unknown option group {group!r}")
            raise HTTPException(status_code=404, detail=f"Unknown option group: {group}")

    return router
