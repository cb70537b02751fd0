"""
services/stats_service.py
-------------------------
Business logic for the /stats command.
Parses the tag, looks the player up and renders an HTML summary.
"""

from html import escape
from typing import List
from urllib.parse import quote

from telegram import Message

from api.clash_api import ClashAPI
from models.player import PlayerStats
from services.command_parser import parse_tag_from_message
from utils.logger import get_logger

logger = get_logger(__name__)

PROFILE_URL = "https://www.clashofstats.com/players/{slug}/summary"

# URI reserved characters are kept as-is in the slug
_SLUG_SAFE = ";,/?:@&=+$-_.!~*'()#"


def build_profile_link(name: str, tag: str) -> str:
    """Link to the player's Clash of Stats summary page."""
    slug = quote(f"{name}-{tag.lstrip('#')}".lower(), safe=_SLUG_SAFE)
    return PROFILE_URL.format(slug=slug)


def format_stat_lines(stats: PlayerStats) -> List[str]:
    """One line per stat; the clan line is left out for clanless players."""
    lines = []
    if stats.clan:
        lines.append(f"<b>Clan</b>: {escape(stats.clan.name)} {escape(stats.clan.tag)}")
    lines += [
        f"<b>Town Hall Level</b>: {stats.town_hall_level}",
        f"<b>Trophies</b>: {stats.trophies}",
        f"<b>Best trophies</b>: {stats.best_trophies}",
        f"<b>War stars</b>: {stats.war_stars}",
    ]
    return lines


def format_player_stats(stats: PlayerStats) -> str:
    """Render the full /stats reply (HTML parse mode)."""
    link = build_profile_link(stats.name, stats.tag)
    header = (
        f'<b>Found the player</b>: <a href="{escape(link)}">'
        f"{escape(stats.name)} {escape(stats.tag)}</a>\n"
    )
    return "\n".join([header, *format_stat_lines(stats)])


class StatsService:
    """Handles the /stats workflow: parse, look up, format."""

    def __init__(self, api: ClashAPI):
        self.api = api

    async def get_stats(self, message: Message) -> str:
        """
        Build the stats reply for a /stats message.

        Raises:
            BotError: USAGE when no tag is given, NOT_FOUND for unknown
                tags, UPSTREAM for provider failures.
        """
        tag = parse_tag_from_message(message)
        stats = await self.api.lookup_player(tag)
        logger.info(f"Found player {stats.tag} (TH{stats.town_hall_level})")
        return format_player_stats(stats)
