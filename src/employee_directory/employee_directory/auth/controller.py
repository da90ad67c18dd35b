from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..container import Container
from ..core.exceptions import DomainError
from ..web import API_PREFIX, error_response, json_body

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route(f"{API_PREFIX}/authenticate", methods=["POST"], endpoint="authenticate_employee")
    def authenticate_employee():
        try:
            view = container.auth_service.authenticate(json_body())
        except DomainError as e:
            return error_response(e, action="authenticating employee")
        except Exception as e:
            logger.exception("Error authenticating employee")
            return jsonify({"error": "Error authenticating employee", "details": str(e)}), 500

        logger.info("Employee %s authenticated", view.id)
        return jsonify({"message": "Authentication successful", "employee": view.to_dict()}), 200
