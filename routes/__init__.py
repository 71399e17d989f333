from routes.scan_routes import router as scan_router
from routes.upload_routes import router as upload_router
from routes.config_routes import router as config_router
from routes.frontend_routes import router as frontend_router

__all__ = [
    'scan_router',
    'upload_router',
    'config_router',
    'frontend_router'
]
