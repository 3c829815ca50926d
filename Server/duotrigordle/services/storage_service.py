"""
Storage Service

Persists each player's daily game and settings as JSON text in a
key-value store shaped like browser local storage. Games are stored as
{id, guesses, startTime, endTime}; targets are never stored and are
recomputed from the id when the record is loaded.

Stored data is untrusted: records from an older or broken client are
rejected and replaced, never raised to the caller.
"""

import json
import math
from abc import ABC, abstractmethod
from dataclasses import asdict, fields
from typing import Any, Dict, Optional, Tuple
from pymongo import ASCENDING
from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi
from ..config.game_settings import NUM_GUESSES, WORD_LENGTH, GAME_STORAGE_KEY, SETTINGS_STORAGE_KEY
from ..models.game import GameSerialized, GameState, SettingsState
from ..utils.game_logger import game_logger
from ..utils.helpers import to_camel_case, to_snake_case
from .game_service import start_game
from .puzzle_service import get_target_words, all_words_guessed


class KeyValueStore(ABC):
    """Namespaced string store. Namespaces keep players apart."""

    @abstractmethod
    def get_item(self, namespace: str, key: str) -> Optional[str]:
        """Return the stored text, or None when the key is absent."""

    @abstractmethod
    def set_item(self, namespace: str, key: str, value: str) -> None:
        """Store text under a key, replacing any previous value."""

    def close_connection(self) -> None:
        """Release backend resources; nothing to do by default."""


class MemoryStore(KeyValueStore):
    """In-process store used for development and tests."""

    def __init__(self):
        self.items: Dict[Tuple[str, str], str] = {}

    def get_item(self, namespace, key):
        return self.items.get((namespace, key))

    def set_item(self, namespace, key, value):
        self.items[(namespace, key)] = value


class MongoStore(KeyValueStore):
    """MongoDB-backed store: one document per (namespace, key)."""

    def __init__(self, mongo_uri: str, db_name: str = 'duotrigordle'):
        """
        Initialize the store with a MongoDB connection.

        Args:
            mongo_uri: MongoDB connection string
            db_name: Database holding the storage collection
        """
        self.client = MongoClient(mongo_uri, server_api=ServerApi('1'))
        self.collection = self.client[db_name].storage

        # Test connection
        try:
            self.client.admin.command('ping')
        except Exception as e:
            game_logger.logger.error(f"MongoDB connection error: {e}")
            raise

        self.collection.create_index([("namespace", ASCENDING), ("key", ASCENDING)], unique=True)

    def get_item(self, namespace, key):
        document = self.collection.find_one({"namespace": namespace, "key": key})
        return document["value"] if document else None

    def set_item(self, namespace, key, value):
        self.collection.update_one(
            {"namespace": namespace, "key": key},
            {"$set": {"value": value}},
            upsert=True
        )

    def close_connection(self):
        """Close the MongoDB connection."""
        if self.client:
            self.client.close()


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return math.isfinite(value)
    return isinstance(value, int)


def _is_playable_guess(guess: str) -> bool:
    return len(guess) == WORD_LENGTH and guess.isalpha() and guess.isupper()


def parse_game_serialized(obj: Any) -> Tuple[Optional[GameSerialized], str]:
    """
    Checks the shape of a stored game record.

    Returns:
        Tuple of (record or None, error_message)
    """
    if not isinstance(obj, dict):
        return None, "Record is not an object"

    if not _is_number(obj.get('id')):
        return None, "Record id is not a number"

    guesses = obj.get('guesses')
    if not isinstance(guesses, list):
        return None, "Record guesses is not an array"

    if len(guesses) > NUM_GUESSES:
        return None, f"Record has more than {NUM_GUESSES} guesses"

    if not all(isinstance(guess, str) for guess in guesses):
        return None, "Record guesses must all be strings"

    if not _is_number(obj.get('startTime')):
        return None, "Record startTime is not a number"

    if not _is_number(obj.get('endTime')):
        return None, "Record endTime is not a number"

    return GameSerialized(
        id=int(obj['id']),
        guesses=list(guesses),
        start_time=int(obj['startTime']),
        end_time=int(obj['endTime'])
    ), ""


def is_game_serialized(obj: Any) -> bool:
    """Check if an object is a valid stored game record."""
    record, _ = parse_game_serialized(obj)
    return record is not None


def serialize_game(state: GameState) -> GameSerialized:
    return GameSerialized(
        id=state.id,
        guesses=list(state.guesses),
        start_time=state.start_time,
        end_time=state.end_time
    )


def deserialize_game(serialized: GameSerialized) -> GameState:
    """Rebuilds a live daily game, recomputing targets from the id."""
    targets = get_target_words(serialized.id)
    game_over = (
        len(serialized.guesses) == NUM_GUESSES or
        all_words_guessed(serialized.guesses, targets)
    )
    return GameState(
        id=serialized.id,
        input="",
        targets=targets,
        guesses=list(serialized.guesses),
        game_over=game_over,
        practice=False,
        start_time=serialized.start_time,
        end_time=serialized.end_time
    )


def settings_to_dict(settings: SettingsState) -> Dict[str, Any]:
    return {to_camel_case(name): value for name, value in asdict(settings).items()}


def merge_settings(settings: SettingsState, stored: Dict[str, Any]) -> SettingsState:
    """Copies known keys from a stored settings object; others are ignored."""
    known = {f.name for f in fields(SettingsState)}
    updates = {}
    for key, value in stored.items():
        name = to_snake_case(key)
        if name in known:
            updates[name] = value
    return SettingsState(**{**asdict(settings), **updates})


class StorageService:
    """
    Loads and saves player records in a KeyValueStore.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store

    def _read_json(self, player_id: str, key: str) -> Any:
        text = self.store.get_item(player_id, key)
        if not text:
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            game_logger.logger.warning(f"Discarding undecodable '{key}' for player {player_id}: {e}")
            return None

    def load_game(self, player_id: str, todays_id: int) -> GameState:
        """
        Loads a player's daily game.

        Falls back to a fresh game for today when there is no record, the
        record is malformed, or it belongs to another day.
        """
        record, error = parse_game_serialized(self._read_json(player_id, GAME_STORAGE_KEY))
        if record is not None and not all(_is_playable_guess(guess) for guess in record.guesses):
            record, error = None, "Record guesses must be uppercase 5-letter words"
        if record is not None and record.id == todays_id:
            return deserialize_game(record)

        if error and self.store.get_item(player_id, GAME_STORAGE_KEY):
            game_logger.logger.warning(f"Discarding stored game for player {player_id}: {error}")
        return start_game(todays_id, practice=False)

    def save_game(self, player_id: str, state: GameState) -> None:
        self.store.set_item(player_id, GAME_STORAGE_KEY, json.dumps(serialize_game(state).to_dict()))

    def load_settings(self, player_id: str) -> SettingsState:
        """Returns default settings updated with whatever the player stored."""
        stored = self._read_json(player_id, SETTINGS_STORAGE_KEY)
        settings = SettingsState()
        if isinstance(stored, dict):
            settings = merge_settings(settings, stored)
        elif stored:
            game_logger.logger.warning(f"Ignoring stored settings for player {player_id}: not an object")
        return settings

    def save_settings(self, player_id: str, settings: SettingsState) -> None:
        self.store.set_item(player_id, SETTINGS_STORAGE_KEY, json.dumps(settings_to_dict(settings)))


# Global service instance
_storage_service = None


def get_storage_service() -> Optional[StorageService]:
    """Get the global storage service instance."""
    return _storage_service


def initialize_storage_service(mongo_uri: Optional[str] = None, db_name: str = 'duotrigordle') -> Optional[StorageService]:
    """
    Initialize the global storage service instance.

    Uses MongoDB when a connection string is given, otherwise an in-memory store.
    """
    global _storage_service
    try:
        store = MongoStore(mongo_uri, db_name) if mongo_uri else MemoryStore()
    except Exception as e:
        game_logger.logger.error(f"Failed to initialize storage service: {e}")
        return None
    _storage_service = StorageService(store)
    return _storage_service
