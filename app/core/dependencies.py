from fastapi import HTTPException, Request, status

from app.services.session import SessionController


def get_controller(request: Request) -> SessionController:
    controller = getattr(request.app.state, "controller", None)
    if controller is None:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Session not started")
    return controller
