"""MongoDB access for the Flask app.

The client is created on first use and shared by every request; tests hand
``init_app`` a ready database object instead.
"""
import atexit
from datetime import timezone

from bson import ObjectId
from bson.errors import InvalidId
from flask import current_app
from pymongo import MongoClient

_EXTENSION_KEY = "taskboard_mongo"


def init_app(app, db=None):
    state = {"client": None, "db": db}
    app.extensions[_EXTENSION_KEY] = state
    atexit.register(close_client, app)

    app.logger.info("Using MongoDB database %r", app.config["MONGO_DB_NAME"])


def get_db():
    state = current_app.extensions[_EXTENSION_KEY]
    if state["db"] is None:
        client = MongoClient(current_app.config["MONGO_URI"], tz_aware=True)
        state["client"] = client
        state["db"] = client[current_app.config["MONGO_DB_NAME"]]
    return state["db"]


def close_client(app):
    state = app.extensions.get(_EXTENSION_KEY) or {}
    client = state.get("client")
    if client is not None:
        client.close()
        state["client"] = None
        state["db"] = None


def to_object_id(value):
    """Return ``value`` as an ObjectId, or None when it cannot be one."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        return None


def format_timestamp(value):
    """ISO 8601 in UTC with millisecond precision, e.g. 2000-01-01T00:00:00.000Z."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec="milliseconds") + "Z"

