from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import error_response
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/qr/scan", methods=["POST"], endpoint="qr_scan")
    def qr_scan():
        """Admin station posts a scanned QR payload together with its bus."""
        data = request.get_json(silent=True) or {}
        try:
            result = container.attendance_service.scan(data.get("scannedData"), data.get("adminBus"))
        except Exception as e:
            return error_response(e)

        return jsonify({
            "success": True,
            "message": "Valid user - attendance marked present",
            "user": result.name,
            "bus": result.bus,
        }), 200

    @app.route("/api/attendance/<user_key>/<month>/<year>", methods=["GET"], endpoint="monthly_summary")
    def monthly_summary(user_key: str, month: str, year: str):
        try:
            summary = container.report_service.monthly_summary(user_key, month, year)
        except Exception as e:
            return error_response(e)
        return jsonify(summary.to_dict()), 200

    @app.route("/api/auto-absent", methods=["POST"], endpoint="auto_absent")
    def auto_absent():
        try:
            result = container.attendance_service.auto_absent()
        except Exception as e:
            return error_response(e)

        return jsonify({
            "success": True,
            "message": "All unscanned users marked absent",
            "checked": result.checked,
            "markedAbsent": result.marked_absent,
        }), 200
