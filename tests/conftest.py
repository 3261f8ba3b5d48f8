"""
Pytest configuration and shared fixtures.
"""
import html
import json

import pytest


def _games_page(games, *, profile_name="tester", with_config=True):
    payload = json.dumps({"strProfileName": profile_name, "rgGames": games})
    if with_config:
        node = f'<template id="gameslist_config" data-profile-gameslist="{html.escape(payload, quote=True)}"></template>'
    else:
        node = '<div class="profile_private_info">This profile is private.</div>'
    return (
        "<!DOCTYPE html><html><head><title>Steam Community :: Games</title></head>"
        f'<body><div id="responsive_page_template_content">{node}</div></body></html>'
    )


@pytest.fixture
def games_page():
    """Builds a /games page with rgGames escaped into the gameslist_config attribute."""
    return _games_page


@pytest.fixture
def sample_games():
    return [
        {"appid": 440, "name": "Team Fortress 2", "playtime_forever": 900, "img_icon_url": "e3f5"},
        {"appid": 570, "name": "Dota 2", "playtime_forever": 15, "img_icon_url": "0bbb"},
        {"appid": 620, "name": "Portal 2", "playtime_forever": 0, "img_icon_url": "2e47", "playtime_2weeks": 0},
        {"appid": 730, "name": "Counter-Strike 2", "playtime_forever": 15, "has_community_visible_stats": True},
        {"appid": 8930, "name": "Sid Meier's Civilization V", "playtime_forever": 3},
    ]
