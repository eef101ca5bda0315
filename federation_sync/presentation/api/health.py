"""Liveness endpoint."""

from fastapi import APIRouter

router = APIRouter(prefix="/health", tags=["observability"])


@router.get("")
async def health():
    return {"status": "ok"}
