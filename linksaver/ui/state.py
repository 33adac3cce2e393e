from dataclasses import dataclass

from linksaver.components.links import LinkCollection
from linksaver.domain.entities import User
from linksaver.ui.screens import Screen


@dataclass
class AppState:
    current_user: User | None = None
    screen: Screen = Screen.LINKS
    links: LinkCollection | None = None

    def sign_in(self, user: User, links: LinkCollection) -> None:
        self.current_user = user
        self.links = links

    def logout(self) -> None:
        self.current_user = None
        self.links = None
