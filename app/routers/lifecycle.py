from fastapi import APIRouter, Depends

from app import schemas
from app.core.dependencies import get_controller
from app.services.session import SessionController

router = APIRouter(prefix="/lifecycle", tags=["lifecycle"])


@router.post("", response_model=schemas.SessionRead)
def change_phase(payload: schemas.PhaseUpdate, controller: SessionController = Depends(get_controller)):
    """Forward a host scene-phase change; backgrounding persists favorites."""
    controller.handle_phase(payload.phase)
    return controller.snapshot()
