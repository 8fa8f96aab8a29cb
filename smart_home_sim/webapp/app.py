"""JSON API over a running HomeController."""

import sys

from flask import Flask, jsonify, request

from smart_home_sim.controllers import HomeController
from smart_home_sim.controllers.home_controller import parse_int
from smart_home_sim.exceptions import DeviceNotFoundError, InvalidInputError, SmartHomeError
from smart_home_sim.settings import load_settings


def _json_body():
    """Request JSON as a dict; an empty or missing body counts as {}"""
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise InvalidInputError("Request body must be a JSON object")
    return payload


def create_app(controller):
    app = Flask(__name__)
    app.config["CONTROLLER"] = controller

    @app.errorhandler(DeviceNotFoundError)
    def handle_not_found(exc):
        return jsonify({"ok": False, "error": str(exc)}), 404

    @app.errorhandler(SmartHomeError)
    def handle_invalid(exc):
        return jsonify({"ok": False, "error": str(exc)}), 400

    @app.route("/api/status")
    def api_status():
        return jsonify(controller.get_status())

    @app.route("/api/logs")
    def api_logs():
        return jsonify(controller.get_logs())

    @app.route("/api/tasks")
    def api_tasks():
        return jsonify(controller.get_tasks())

    @app.route("/api/devices/<name>/toggle", methods=["POST"])
    def api_toggle(name):
        device = controller.toggle(name)
        return jsonify({"ok": True, "name": device.name, "state": device.state_label()})

    @app.route("/api/sensor", methods=["POST"])
    def api_sensor():
        payload = _json_body()
        value = controller.trigger_sensor(payload.get("value"))
        return jsonify({"ok": True, "value": value})

    @app.route("/api/schedule", methods=["POST"])
    def api_schedule():
        payload = _json_body()
        task = controller.schedule(
            payload.get("device", ""),
            payload.get("state", ""),
            payload.get("strategy", ""),
            payload.get("seconds"),
        )
        return jsonify({"ok": True, "task": task.describe()})

    @app.route("/api/tick", methods=["POST"])
    def api_tick():
        payload = _json_body()
        steps = parse_int(payload.get("steps", 1), "Tick count")
        return jsonify({"ok": True, "time": controller.tick(steps)})

    @app.route("/api/reset", methods=["POST"])
    def api_reset():
        controller.reset()
        return jsonify({"ok": True, "time": controller.current_time})

    return app


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    settings = load_settings(argv[0]) if argv else load_settings()
    web_cfg = settings.get("web", {})

    controller = HomeController(settings)
    controller.start()
    app = create_app(controller)
    try:
        # single request thread: the controller is not shared between threads
        app.run(host=web_cfg.get("host", "0.0.0.0"), port=int(web_cfg.get("port", 5000)),
                threaded=False)
    finally:
        controller.cleanup()


if __name__ == "__main__":
    main()
