"""
Procedural generation of leagues, clubs, rosters and draft prospects for Footy Career.
"""
from .generate import create_profile, generate_league, generate_prospect, random_player_name

__all__ = ["create_profile", "generate_league", "generate_prospect", "random_player_name"]
