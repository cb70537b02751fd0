"""
models/player.py
----------------
Read-only shapes returned by the Clash of Clans API.
They live only for the duration of a single command.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Clan:
    """The clan a player currently belongs to."""
    name: str
    tag: str


@dataclass(frozen=True)
class PlayerStats:
    """
    A player's public profile summary.

    Attributes:
        name: In-game name.
        tag: Player tag, including the leading '#'.
        town_hall_level: Current Town Hall level.
        trophies: Current trophy count.
        best_trophies: All-time best trophy count.
        war_stars: Total stars earned in clan wars.
        clan: The player's clan, or None when clanless.
    """
    name: str
    tag: str
    town_hall_level: int
    trophies: int
    best_trophies: int
    war_stars: int
    clan: Optional[Clan] = None

    @classmethod
    def from_api(cls, data: dict, tag: str) -> "PlayerStats":
        """
        Build from a ``GET /players/{tag}`` body.

        ``tag`` is the tag the user asked for; the response's own tag is
        only used when present.

        Raises:
            KeyError: If a required field is missing from the body.
        """
        clan_data = data.get("clan")
        clan = Clan(name=clan_data["name"], tag=clan_data["tag"]) if clan_data else None
        return cls(
            name=data["name"],
            tag=tag,
            town_hall_level=data["townHallLevel"],
            trophies=data["trophies"],
            best_trophies=data["bestTrophies"],
            war_stars=data["warStars"],
            clan=clan,
        )


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of ``POST /players/{tag}/verifytoken``."""
    tag: str
    status: str

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @classmethod
    def from_api(cls, data: dict, tag: str) -> "VerificationResult":
        return cls(tag=data.get("tag", tag), status=str(data.get("status", "")))
