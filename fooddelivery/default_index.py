from flask import Blueprint, current_app, jsonify

from .errors import StorageFault

default_bp = Blueprint("default", __name__)


@default_bp.route("/", methods=["GET"])
def index():
    """
    後端初始狀態檢查
    """
    from . import __version__

    return jsonify({
        "status": "ok",
        "message": "後端 API 正常運作中",
        "version": __version__
    })


@default_bp.route("/health", methods=["GET"])
def health_check():
    try:
        total = current_app.extensions["restaurant_repository"].count()
    except StorageFault as exc:
        return jsonify({"status": "error", "error": str(exc)}), 503
    return jsonify({"status": "ok", "restaurants": total}), 200
