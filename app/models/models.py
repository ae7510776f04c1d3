import enum


class ScenePhase(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    BACKGROUND = "background"


class SessionStage(str, enum.Enum):
    NO_JOKE_LOADED = "NO_JOKE_LOADED"
    JOKE_DISPLAYED = "JOKE_DISPLAYED"
