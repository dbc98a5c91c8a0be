"""Saving and restoring role-playing game state with mementos."""

from __future__ import annotations

from typing import Optional, TextIO


class RolesPlayGame:
    """A role-playing game whose role and scenario state can be archived."""

    def __init__(self, name: str, role_name: str) -> None:
        self.name = name
        self.roles_state: list[str] = [role_name, "血量100"]
        self.scenario_state = "开始通过第一关"

    def save(self, tag: str) -> RPGArchive:
        """Archive the current state under ``tag``."""
        return RPGArchive(tag, list(self.roles_state), self.scenario_state, self)

    def __str__(self) -> str:
        return (
            f"在{self.name}游戏中，玩家使用{self.roles_state[0]},"
            f"{self.roles_state[1]},{self.scenario_state};"
        )


class RPGArchive:
    """A saved game state that can be restored into its game."""

    def __init__(
        self,
        tag: str,
        roles_state: list[str],
        scenario_state: str,
        rpg: RolesPlayGame,
    ) -> None:
        self.tag = tag
        self.roles_state = roles_state
        self.scenario_state = scenario_state
        self.rpg = rpg

    def restore(self) -> None:
        """Put the saved state back into the game."""
        self.rpg.roles_state = list(self.roles_state)
        self.rpg.scenario_state = self.scenario_state


class RPGArchiveManager:
    """Keeps archives by tag."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self.archives: dict[str, RPGArchive] = {}
        self.out = out

    def reload(self, tag: str) -> bool:
        """Restore the archive with ``tag``; return False if there is none."""
        archive = self.archives.get(tag)
        if archive is None:
            return False
        print(f"重新加载{tag};", file=self.out)
        archive.restore()
        return True

    def put(self, memento: RPGArchive) -> None:
        """Store an archive under its tag, replacing any with the same tag."""
        self.archives[memento.tag] = memento