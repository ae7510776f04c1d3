from app.models.models import ScenePhase, SessionStage

__all__ = ["ScenePhase", "SessionStage"]
