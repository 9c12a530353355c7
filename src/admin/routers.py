from fastapi import APIRouter

from .features.create_event.router import router as create_event_router
from .features.delete_guest.router import router as delete_guest_router
from .features.load_page.router import router as load_page_router

router = APIRouter()

router.include_router(load_page_router)
router.include_router(create_event_router)
router.include_router(delete_guest_router)
