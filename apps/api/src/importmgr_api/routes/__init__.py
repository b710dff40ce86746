from importmgr_api.routes.boe import router as boe_router
from importmgr_api.routes.duty import router as duty_router
from importmgr_api.routes.health import router as health_router
from importmgr_api.routes.reports import router as reports_router

__all__ = [
    "boe_router",
    "duty_router",
    "health_router",
    "reports_router",
]
