from typing import Any

from pydantic import BaseModel, ConfigDict

# --- Collections ---

USERS_COLLECTION = "users"
LINKS_SUBCOLLECTION = "links"


def links_collection(uid: str) -> str:
    return f"{USERS_COLLECTION}/{uid}/{LINKS_SUBCOLLECTION}"


# --- User & Profile ---

class User(BaseModel):
    uid: str
    email: str


class UserProfile(BaseModel):
    uid: str
    email: str | None = None
    avatar_path: str | None = None

    @classmethod
    def from_document(cls, uid: str, data: dict[str, Any]) -> "UserProfile":
        return cls(uid=uid, email=data.get("email"), avatar_path=data.get("avatarPath"))


# --- Links ---

class LinkItem(BaseModel):
    """A saved link. The title doubles as the document key."""

    model_config = ConfigDict(frozen=True)

    title: str
    url: str
    is_favorite: bool = False

    def to_document(self) -> dict[str, Any]:
        return {"title": self.title, "url": self.url, "isFavorite": self.is_favorite}

    @classmethod
    def from_document(cls, data: dict[str, Any]) -> "LinkItem":
        return cls(
            title=data["title"],
            url=data["url"],
            is_favorite=bool(data.get("isFavorite") or False),
        )


# --- Local files ---

class CapturedImage(BaseModel):
    name: str
    data: bytes
