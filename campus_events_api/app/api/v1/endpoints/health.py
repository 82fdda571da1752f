"""
Liveness endpoint.
"""

from typing import Dict

from fastapi import APIRouter, Request


router = APIRouter()


@router.get("/health")
async def health(request: Request) -> Dict[str, str]:
    return {"status": "ok", "version": request.app.state.settings.api_version}
