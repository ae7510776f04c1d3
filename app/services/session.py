"""Session controller - holds the displayed joke and dispatches user intents."""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from app import schemas
from app.core.errors import FetchError, PersistError
from app.models import ScenePhase, SessionStage
from app.schemas.schemas import PLACEHOLDER_JOKE
from app.services.favorites import FavoritesStore
from app.services.joke_fetcher import JokeFetcher
from app.services.persistence import FavoritesGateway

logger = logging.getLogger(__name__)


class SessionController:
    """Owns session state; presentation layers read snapshots and send intents.

    The favorite flag tracks whether the displayed joke was marked during this
    session. It resets on every new joke and is only set by a successful add.
    Overlapping fetches are allowed; a response never replaces a joke that
    came from a later request.
    """

    def __init__(
        self,
        fetcher: JokeFetcher,
        gateway: FavoritesGateway,
        favorites: Optional[FavoritesStore] = None,
    ):
        self.fetcher = fetcher
        self.gateway = gateway
        self.favorites = favorites if favorites is not None else FavoritesStore()
        self.state = SessionStage.NO_JOKE_LOADED
        self.current_joke: schemas.JokeRecord = PLACEHOLDER_JOKE
        self.is_current_favorite = False
        self._dirty = False
        self._issued = 0
        self._applied = 0
        self._observers: List[Callable[[schemas.SessionRead], None]] = []

    @property
    def has_unsaved_changes(self) -> bool:
        return self._dirty

    def subscribe(self, callback: Callable[[schemas.SessionRead], None]) -> None:
        """Add a callback to be notified with a snapshot after every change."""
        self._observers.append(callback)

    def snapshot(self) -> schemas.SessionRead:
        return schemas.SessionRead(
            state=self.state,
            current_joke=self.current_joke,
            is_current_favorite=self.is_current_favorite,
            favorites=list(self.favorites.all()),
        )

    def _notify(self) -> None:
        if not self._observers:
            return
        snapshot = self.snapshot()
        for callback in list(self._observers):
            try:
                callback(snapshot)
            except Exception:
                logger.exception("Session observer %r failed", callback)

    async def start(self) -> None:
        self.load_favorites()
        await self.request_new_joke()

    async def request_new_joke(self) -> bool:
        self._issued += 1
        ticket = self._issued
        try:
            joke = await self.fetcher.fetch_joke()
        except FetchError as exc:
            logger.warning("Could not retrieve or decode a joke (%s): %s", exc.operation, exc.cause)
            return False

        if ticket < self._applied:
            logger.debug("Discarding joke %s from superseded request #%d", joke.id, ticket)
            return False

        self._applied = ticket
        self.current_joke = joke
        self.is_current_favorite = False
        self.state = SessionStage.JOKE_DISPLAYED
        self._notify()
        return True

    def mark_current_as_favorite(self) -> bool:
        if self.state is not SessionStage.JOKE_DISPLAYED or self.is_current_favorite:
            return False
        if not self.favorites.add(self.current_joke):
            logger.info("Joke %s is already a favorite", self.current_joke.id)
            return False
        self.is_current_favorite = True
        self._dirty = True
        self._notify()
        return True

    def remove_favorite(self, joke_id: str) -> bool:
        """Drop every favorite with the given id; returns False if none matched."""
        removed = False
        for record in self.favorites.all():
            if record.id == joke_id:
                removed = self.favorites.remove(record) or removed
        if not removed:
            return False
        if self.is_current_favorite and self.current_joke.id == joke_id:
            self.is_current_favorite = False
        self._dirty = True
        self._notify()
        return True

    def load_favorites(self) -> bool:
        try:
            records = self.gateway.load()
        except PersistError as exc:
            logger.warning("Could not load favorites (%s): %s", exc.operation, exc.cause)
            return False
        self.favorites.replace_all(records)
        self._notify()
        return True

    def save_favorites(self) -> bool:
        try:
            self.gateway.save(self.favorites.all())
        except PersistError as exc:
            logger.warning("Unable to save favorites (%s): %s", exc.operation, exc.cause)
            return False
        self._dirty = False
        return True

    def handle_phase(self, phase: ScenePhase) -> None:
        phase = ScenePhase(phase)
        if phase is ScenePhase.BACKGROUND:
            logger.info("Background")
            self.save_favorites()
        elif phase is ScenePhase.ACTIVE:
            logger.info("Active")
        else:
            logger.info("Inactive")

    async def aclose(self) -> None:
        await self.fetcher.aclose()
