from fastapi import APIRouter, Depends, HTTPException, status

from app import schemas
from app.core.dependencies import get_controller
from app.services.session import SessionController

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.get("", response_model=list[schemas.JokeRecord])
def list_favorites(controller: SessionController = Depends(get_controller)):
    return list(controller.favorites.all())


@router.delete("/{joke_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_favorite(joke_id: str, controller: SessionController = Depends(get_controller)):
    if not controller.remove_favorite(joke_id):
        raise HTTPException(status_code=404, detail="Favorite not found")
    return None
