"""
SQLite persistence for Footy Career: named save slots and the hall of fame.
"""
from .schema import get_connection, get_db_path, init_db
from .operations import (
    validate_slot_name,
    save_game,
    load_game,
    list_saves,
    delete_save,
    insert_hall_of_fame,
    get_hall_of_fame,
)

__all__ = [
    "get_connection",
    "get_db_path",
    "init_db",
    "validate_slot_name",
    "save_game",
    "load_game",
    "list_saves",
    "delete_save",
    "insert_hall_of_fame",
    "get_hall_of_fame",
]
