from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..container import Container
from ..core.exceptions import DomainError
from ..web import API_PREFIX, error_response, json_body
from .service import build_patch

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    def _unexpected(action: str, e: Exception):
        logger.exception("Error %s", action)
        return jsonify({"error": f"Error {action}", "details": str(e)}), 500

    @app.route(API_PREFIX, methods=["POST"], endpoint="create_employee")
    def create_employee():
        data = json_body()
        try:
            created = service.create_employee(
                name=data.get("name"),
                email=data.get("email"),
                department=data.get("department"),
                role=data.get("role"),
                password=data.get("password"),
                fingerprint_sample=data.get("fingerprintSample"),
                face_sample=data.get("faceSample"),
            )
        except DomainError as e:
            return error_response(e, action="creating employee")
        except Exception as e:
            return _unexpected("creating employee", e)

        if not created.fully_stored:
            logger.warning("Employee %s created with missing credentials", created.employee.id)
        return (
            jsonify(
                {
                    "message": "Employee created successfully",
                    "employee": created.employee.to_dict(),
                    "credentials": [r.to_dict() for r in created.credentials],
                }
            ),
            201,
        )

    @app.route(API_PREFIX, methods=["GET"], endpoint="list_employees")
    def list_employees():
        try:
            employees = service.list_employees()
        except DomainError as e:
            return error_response(e, action="listing employees")
        except Exception as e:
            return _unexpected("listing employees", e)
        logger.info("Listed %d active employees", len(employees))
        return jsonify([emp.to_dict() for emp in employees]), 200

    @app.route(f"{API_PREFIX}/<int:employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: int):
        try:
            employee = service.get_employee(employee_id)
        except DomainError as e:
            return error_response(e, action="fetching employee")
        except Exception as e:
            return _unexpected("fetching employee", e)
        logger.info("Fetched employee %s", employee_id)
        return jsonify(employee.to_dict()), 200

    @app.route(f"{API_PREFIX}/<int:employee_id>", methods=["PUT"], endpoint="update_employee")
    def update_employee(employee_id: int):
        data = json_body()
        try:
            employee = service.update_employee(employee_id, build_patch(data))
        except DomainError as e:
            return error_response(e, action="updating employee")
        except Exception as e:
            return _unexpected("updating employee", e)

        logger.info("Employee %s updated", employee_id)
        return jsonify({"message": "Employee updated successfully", "employee": employee.to_dict()}), 200

    @app.route(f"{API_PREFIX}/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: int):
        try:
            service.delete_employee(employee_id)
        except DomainError as e:
            return error_response(e, action="deleting employee")
        except Exception as e:
            return _unexpected("deleting employee", e)
        return jsonify({"message": "Employee deleted successfully"}), 200

    @app.route(f"{API_PREFIX}/check-email/<string:email>", methods=["GET"], endpoint="check_email")
    def check_email(email: str):
        try:
            exists = service.email_exists(email)
        except DomainError as e:
            return error_response(e, action="checking email")
        except Exception as e:
            return _unexpected("checking email", e)
        return jsonify({"exists": exists}), 200

    @app.route(f"{API_PREFIX}/check-name/<string:name>", methods=["GET"], endpoint="check_name")
    def check_name(name: str):
        try:
            exists = service.name_exists(name)
        except DomainError as e:
            return error_response(e, action="checking name")
        except Exception as e:
            return _unexpected("checking name", e)
        return jsonify({"exists": exists}), 200
