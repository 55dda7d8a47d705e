from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.enums import AttendanceAction


def register(app: Flask, container: Container) -> None:
    controller = container.session_controller

    def _state(status: int = 200, **extra):
        body = {"state": controller.view().to_dict()}
        body.update(extra)
        return jsonify(body), status

    def _json_field(name: str):
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        value = data.get(name)
        if value is None or not str(value).strip():
            return None
        return str(value).strip()

    @app.route("/api/kiosk/state", methods=["GET"], endpoint="kiosk_state")
    def kiosk_state():
        return _state()

    @app.route("/api/kiosk/roster/refresh", methods=["POST"], endpoint="kiosk_roster_refresh")
    def kiosk_roster_refresh():
        outcome = controller.refresh_roster()
        return _state(roster={"source": outcome.source.value, "count": outcome.employee_count, "error": outcome.error})

    @app.route("/api/kiosk/select", methods=["POST"], endpoint="kiosk_select")
    def kiosk_select():
        employee_id = _json_field("employeeId")
        if employee_id is None:
            return jsonify({"success": False, "message": "employeeId is required"}), 400
        employee = controller.select_employee(employee_id)
        return _state(success=employee is not None)

    @app.route("/api/kiosk/pin/key", methods=["POST"], endpoint="kiosk_pin_key")
    def kiosk_pin_key():
        """One keypad press: a digit, Backspace, Enter, Escape or Delete."""
        key = _json_field("key")
        if key is None:
            return jsonify({"success": False, "message": "key is required"}), 400
        employee = controller.press_key(key)
        return _state(identified=employee is not None)

    @app.route("/api/kiosk/actions/<slug>", methods=["POST"], endpoint="kiosk_action")
    def kiosk_action(slug: str):
        try:
            action = AttendanceAction(slug)
        except ValueError:
            return jsonify({"success": False, "message": f"Unknown action {slug}"}), 404
        result = controller.perform(action)
        return _state(result=result.value)

    @app.route("/api/kiosk/cancel", methods=["POST"], endpoint="kiosk_cancel")
    def kiosk_cancel():
        result = controller.cancel()
        return _state(result=result.value)
