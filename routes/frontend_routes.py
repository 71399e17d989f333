# Single-page app passthrough
from fastapi import APIRouter
from fastapi.responses import FileResponse, JSONResponse
from pathlib import Path
from config.settings import get_settings

router = APIRouter(tags=['Frontend'])

def resolve_static_file(static_dir: Path, requested: str) -> Path:
    """Map a request path onto a file under static_dir, falling back to index.html"""
    root = static_dir.resolve()
    if requested:
        candidate = (root / requested).resolve()
        if candidate.is_relative_to(root) and candidate.is_file():
            return candidate
    return root / 'index.html'

@router.get('/{full_path:path}', include_in_schema=False)
async def serve_frontend(full_path: str):
    target = resolve_static_file(Path(get_settings().static_dir), full_path)
    if not target.is_file():
        return JSONResponse(status_code=404, content={'error': 'Not found'})
    return FileResponse(target)
