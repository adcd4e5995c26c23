from taskboard.client.api_client import ApiError, TaskApiClient
from taskboard.client.controller import BoardController
from taskboard.client.state import BoardState
from taskboard.client.view import render

__all__ = ["ApiError", "BoardController", "BoardState", "TaskApiClient", "render"]
