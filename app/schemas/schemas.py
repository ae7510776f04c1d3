from typing import Any, List

from pydantic import BaseModel, ConfigDict

from app.models import ScenePhase, SessionStage


class JokeRecord(BaseModel):
    """A joke as issued by the remote source.

    Frozen and strictly typed: ``status`` must arrive as a real integer and
    ``id``/``joke`` as strings, so a record is either fully valid or never
    built. Equality and hashing cover all three fields.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    id: str
    joke: str
    status: int

    @classmethod
    def from_payload(cls, payload: Any) -> "JokeRecord":
        return cls.model_validate(payload)

    def to_payload(self) -> dict:
        return {"id": self.id, "joke": self.joke, "status": self.status}


PLACEHOLDER_JOKE = JokeRecord(id="", joke="Knock, knock...", status=0)


class SessionRead(BaseModel):
    state: SessionStage
    current_joke: JokeRecord
    is_current_favorite: bool
    favorites: List[JokeRecord]


class IntentResult(BaseModel):
    changed: bool
    session: SessionRead


class PhaseUpdate(BaseModel):
    phase: ScenePhase
