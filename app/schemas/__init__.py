from app.schemas.schemas import IntentResult, JokeRecord, PhaseUpdate, SessionRead

__all__ = ["IntentResult", "JokeRecord", "PhaseUpdate", "SessionRead"]
