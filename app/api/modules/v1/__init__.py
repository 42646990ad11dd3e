from fastapi import APIRouter

from app.api.modules.v1.admin.routes.admin_routes import router as admin_router
from app.api.modules.v1.auth.routes.auth_routes import router as auth_router
from app.api.modules.v1.consultants.routes.consultant_routes import router as consultants_router
from app.api.modules.v1.inquiries.routes.inquiry_routes import router as inquiries_router

router = APIRouter(prefix="/v1")
router.include_router(auth_router)
router.include_router(consultants_router)
router.include_router(inquiries_router)
router.include_router(admin_router)
