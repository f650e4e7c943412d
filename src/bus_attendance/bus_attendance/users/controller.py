from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..common.responses import error_response
from ..container import Container
from ..qr.image import render_png


def register(app: Flask, container: Container) -> None:
    @app.route("/api/users/register", methods=["POST"], endpoint="register_user")
    def register_user():
        data = request.get_json(silent=True) or request.form
        try:
            user = container.user_service.register(
                user_key=data.get("userId"),
                name=data.get("name"),
                bus=data.get("bus"),
                role=data.get("role"),
                password=data.get("password"),
            )
        except Exception as e:
            return error_response(e)

        return jsonify({
            "success": True,
            "message": "User registered successfully",
            "userId": user.user_key,
            "role": user.role.value,
        }), 201

    @app.route("/api/users/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or request.form
        try:
            result = container.auth_service.authenticate(data.get("userId"), data.get("password"))
        except Exception as e:
            return error_response(e)
        return jsonify(result.to_dict()), 200

    @app.route("/api/users/<bus>", methods=["GET"], endpoint="bus_roster")
    def bus_roster(bus: str):
        """Riders assigned to one bus, for the admin panel."""
        try:
            roster = container.user_service.list_by_bus(bus)
        except Exception as e:
            return error_response(e)
        return jsonify([r.to_dict() for r in roster]), 200

    @app.route("/api/users/<user_key>/qr.png", methods=["GET"], endpoint="user_qr_image")
    def user_qr_image(user_key: str):
        """Render the rider's stored QR payload as a PNG."""
        try:
            payload = container.user_service.get_qr_payload(user_key)
            png = render_png(
                payload,
                box_size=app.config["QR_BOX_SIZE"],
                border=app.config["QR_BORDER"],
            )
        except Exception as e:
            return error_response(e)
        return send_file(io.BytesIO(png), mimetype="image/png", download_name=f"{user_key}.png")
