import math

from flask import Blueprint, current_app, jsonify, request
from pymongo import DESCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from taskboard.models.task_model import Task, TaskValidationError, utcnow
from taskboard.utils.db import get_db, to_object_id


tasks_bp = Blueprint("tasks", __name__)


@tasks_bp.get("")
def list_tasks():
    try:
        docs = get_db().tasks.find({}).sort("created_at", DESCENDING)
        items = [Task.from_document(d).to_json() for d in docs]
    except PyMongoError:
        current_app.logger.exception("Error fetching tasks")
        return jsonify(error="Failed to fetch tasks"), 500
    return jsonify(items), 200


@tasks_bp.get("/stats")
def task_stats():
    # Each figure is its own count query; the collection is expected to be small.
    try:
        tasks = get_db().tasks
        total = tasks.count_documents({})
        completed = tasks.count_documents({"status": "completed"})
        in_progress = tasks.count_documents({"status": "in-progress"})
        pending = tasks.count_documents({"status": "pending"})
    except PyMongoError:
        current_app.logger.exception("Error fetching stats")
        return jsonify(error="Failed to fetch statistics"), 500

    # half rounds up
    completion_rate = math.floor(completed / total * 100 + 0.5) if total > 0 else 0
    return jsonify(
        totalTasks=total,
        completedTasks=completed,
        inProgressTasks=in_progress,
        pendingTasks=pending,
        completionRate=completion_rate,
    ), 200


@tasks_bp.post("")
def create_task():
    payload = request.get_json(silent=True) or {}
    try:
        task = Task.from_payload(payload)
        db = get_db()
        res = db.tasks.insert_one(task.to_document())
        created = db.tasks.find_one({"_id": res.inserted_id})
    except (TaskValidationError, PyMongoError):
        current_app.logger.exception("Error creating task")
        return jsonify(error="Failed to create task"), 500
    return jsonify(Task.from_document(created).to_json()), 201


@tasks_bp.put("/<task_id>")
def update_task(task_id):
    """Replace every mutable field of a task with the request body.

    Optional fields missing from the body are removed from the document.
    """
    oid = to_object_id(task_id)
    if oid is None:
        return jsonify(error="Task not found"), 404

    payload = request.get_json(silent=True) or {}
    try:
        tasks = get_db().tasks
        if tasks.find_one({"_id": oid}, {"_id": 1}) is None:
            return jsonify(error="Task not found"), 404

        replacement = Task.from_payload(payload)
        updates = {}
        removed = {}
        for name, value in replacement.mutable_fields().items():
            if value is None:
                removed[name] = ""
            else:
                updates[name] = value
        updates["updated_at"] = utcnow()

        operation = {"$set": updates}
        if removed:
            operation["$unset"] = removed
        res = tasks.find_one_and_update(
            {"_id": oid},
            operation,
            return_document=ReturnDocument.AFTER,
        )
    except (TaskValidationError, PyMongoError):
        current_app.logger.exception("Error updating task %s", task_id)
        return jsonify(error="Failed to update task"), 500

    if not res:
        return jsonify(error="Task not found"), 404
    return jsonify(Task.from_document(res).to_json()), 200


@tasks_bp.delete("/<task_id>")
def delete_task(task_id):
    oid = to_object_id(task_id)
    if oid is None:
        return jsonify(error="Task not found"), 404
    try:
        res = get_db().tasks.delete_one({"_id": oid})
    except PyMongoError:
        current_app.logger.exception("Error deleting task %s", task_id)
        return jsonify(error="Failed to delete task"), 500
    if res.deleted_count == 0:
        return jsonify(error="Task not found"), 404
    return jsonify(message="Task deleted successfully"), 200
