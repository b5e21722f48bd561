"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from recruitai.api.routes.ai_routes import router as ai_router
from recruitai.api.routes.auth_routes import router as auth_router
from recruitai.api.routes.questionnaire_routes import router as questionnaire_router
from recruitai.api.routes.jd_routes import router as jd_router
from recruitai.api.routes.draft_routes import router as draft_router
from recruitai.api.routes.dashboard_routes import router as dashboard_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(ai_router)
api_router.include_router(auth_router)
api_router.include_router(questionnaire_router)
api_router.include_router(jd_router)
api_router.include_router(draft_router)
api_router.include_router(dashboard_router)
