from typing import Any, Dict, Optional
import logging

from flask import Blueprint, current_app, jsonify, request

from ..errors import StorageFault
from ..models import Restaurant

logger = logging.getLogger(__name__)

restaurant_bp = Blueprint("restaurant", __name__, url_prefix="/api/restaurants")


def get_repository():
    """The store wired in by create_app()."""
    return current_app.extensions["restaurant_repository"]


def not_found(msg: str = "餐廳不存在"):
    return jsonify({"error": msg}), 404


def storage_error(exc: StorageFault):
    return jsonify({"error": str(exc) or "資料庫存取失敗"}), 500


def _read_name(payload: Optional[Dict[str, Any]]):
    """Validate a request body; returns (name, error_response)."""
    if not isinstance(payload, dict):
        return None, (jsonify({"error": "缺少餐廳資料"}), 400)
    name = payload.get("name")
    if name is not None and not isinstance(name, str):
        return None, (jsonify({"error": "name 必須是字串"}), 400)
    return name, None


@restaurant_bp.route("/images", methods=["GET"])
def get_restaurant_images() -> Any:
    """List every restaurant as ``[{"id": ..., "name": ...}]``."""
    logger.debug("get_restaurant_images()")
    try:
        restaurants = get_repository().find_all()
    except StorageFault as exc:
        logger.debug("get_restaurant_images() failed: %s", exc)
        return storage_error(exc)
    return jsonify([r.to_dict() for r in restaurants]), 200


@restaurant_bp.route("/<int:restaurant_id>", methods=["GET"])
def get_restaurant(restaurant_id: int) -> Any:
    try:
        restaurant = get_repository().find_by_id(restaurant_id)
    except StorageFault as exc:
        return storage_error(exc)
    return jsonify(restaurant.to_dict()) if restaurant else not_found()


@restaurant_bp.route("", methods=["POST"])
def create_restaurant() -> Any:
    name, error = _read_name(request.get_json(silent=True))
    if error:
        return error
    try:
        restaurant = get_repository().save(Restaurant(name=name))
    except StorageFault as exc:
        return storage_error(exc)
    logger.info("Created restaurant %s", restaurant.id)
    return jsonify(restaurant.to_dict()), 201


@restaurant_bp.route("/<int:restaurant_id>", methods=["PUT"])
def update_restaurant(restaurant_id: int) -> Any:
    name, error = _read_name(request.get_json(silent=True))
    if error:
        return error
    repository = get_repository()
    try:
        restaurant = repository.find_by_id(restaurant_id)
        if restaurant is None:
            return not_found()
        restaurant.name = name
        restaurant = repository.save(restaurant)
    except StorageFault as exc:
        return storage_error(exc)
    return jsonify(restaurant.to_dict()), 200


@restaurant_bp.route("/<int:restaurant_id>", methods=["DELETE"])
def delete_restaurant(restaurant_id: int) -> Any:
    try:
        get_repository().delete_by_id(restaurant_id)
    except StorageFault as exc:
        return storage_error(exc)
    return "", 204
