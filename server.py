# SafeScanX API Server
from fastapi import FastAPI, APIRouter, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from config import get_settings, Database
from config.context import build_scan_context
from routes import (
    scan_router,
    upload_router,
    config_router,
    frontend_router
)
from utils.errors import ScanError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
# httpx logs full request URLs at INFO, which include the VirusTotal key
logging.getLogger('httpx').setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

settings = get_settings()

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await Database.connect_db()
    app.state.scan_context = build_scan_context(settings)
    logger.info('Application started')
    yield
    # Shutdown
    await Database.close_db()
    logger.info('Application shutdown')

app = FastAPI(
    title='SafeScanX API',
    description='URL and file malware scanning backed by VirusTotal',
    version='1.0.0',
    lifespan=lifespan
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins.split(','),
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

@app.exception_handler(ScanError)
async def scan_error_handler(request: Request, exc: ScanError):
    return JSONResponse(status_code=exc.status_code, content={'error': exc.message})

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={'error': 'Invalid request body'})

@app.get('/health')
async def health():
    return {'status': 'healthy'}

# API Router
api_router = APIRouter(prefix='/api')
api_router.include_router(config_router)

@api_router.get('/health')
async def api_health():
    return {
        'status': 'healthy',
        'service': 'safescanx-api',
        'version': '1.0.0'
    }

app.include_router(api_router)
app.include_router(scan_router)
app.include_router(upload_router)

# Catch-all must be registered last
app.include_router(frontend_router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("server:app", port=3000, reload=True)
