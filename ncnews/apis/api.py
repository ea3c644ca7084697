import json
from functools import lru_cache

from fastapi import APIRouter

from ncnews.core.settings import ENDPOINTS_FILE

router = APIRouter()
' prefix="/api"'


@lru_cache(maxsize=1)
def load_endpoints() -> dict:
    with open(ENDPOINTS_FILE, encoding="utf-8") as f:
        return json.load(f)


@router.get("",
            summary="API 문서",
            description="Describes every endpoint served under /api.")
async def get_endpoints():
    return {"endpoints": load_endpoints()}
