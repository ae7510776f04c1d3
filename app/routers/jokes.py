from fastapi import APIRouter, Depends

from app import schemas
from app.core.dependencies import get_controller
from app.services.session import SessionController

router = APIRouter(prefix="/jokes", tags=["jokes"])


@router.get("/current", response_model=schemas.SessionRead)
def current_joke(controller: SessionController = Depends(get_controller)):
    return controller.snapshot()


@router.post("/next", response_model=schemas.IntentResult)
async def next_joke(controller: SessionController = Depends(get_controller)):
    changed = await controller.request_new_joke()
    return schemas.IntentResult(changed=changed, session=controller.snapshot())


@router.post("/current/favorite", response_model=schemas.IntentResult)
def mark_favorite(controller: SessionController = Depends(get_controller)):
    changed = controller.mark_current_as_favorite()
    return schemas.IntentResult(changed=changed, session=controller.snapshot())
