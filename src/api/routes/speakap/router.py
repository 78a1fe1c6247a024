"""Router agregador do Speakap."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.speakap.signed_request import router as signed_request_router

router = APIRouter()
router.include_router(signed_request_router)
