from __future__ import annotations

import io
from typing import Any, Dict

from flask import Flask, flash, jsonify, render_template, request, send_file

from ..common.images import photo_to_data_url
from ..container import Container
from ..core.constants import BACKGROUND_PRESETS, DEFAULT_MAX_PHOTO_BYTES
from ..core.enums import BackgroundType
from ..core.exceptions import EmployeeNotFoundError, StorageError, ValidationError
from .model import EmployeeRecord
from .qr import make_qr_data_url, make_qr_png, profile_url, qr_filename
from .vcard import VCARD_MIMETYPE, build_vcard, vcard_filename

_FORM_FIELDS = ("name", "company", "position", "phone", "workPhone", "email", "website", "backgroundType", "backgroundColor")


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.template_filter("header_background")
    def header_background(employee: EmployeeRecord) -> str:
        if employee.background_type == BackgroundType.GRADIENT:
            return (
                f"background-color: {employee.background_color}; "
                f"background-image: linear-gradient(135deg, {employee.background_color} 0%, rgba(0, 0, 0, 0.85) 100%);"
            )
        return f"background-color: {employee.background_color};"

    def base_url() -> str:
        return app.config.get("PUBLIC_BASE_URL") or request.host_url

    def render_form(form: Dict[str, Any], status: int = 200):
        return render_template("index.html", form=form, presets=BACKGROUND_PRESETS, active_page="create"), status

    # ------------------------------------------------------------------
    # HTML: create form and confirmation
    # ------------------------------------------------------------------
    @app.route("/", methods=["GET", "POST"], endpoint="index")
    def index():
        if request.method == "GET":
            return render_form(EmployeeRecord().to_dict())

        form = {key: request.form.get(key, "") for key in _FORM_FIELDS}
        try:
            form["photo"] = photo_to_data_url(
                request.files.get("photo"),
                max_bytes=int(app.config.get("MAX_PHOTO_BYTES", DEFAULT_MAX_PHOTO_BYTES)),
            )
            record = EmployeeRecord.from_dict(form)
            employee_id = service.create(record)
        except ValidationError as e:
            flash(str(e), "danger")
            return render_form(form, 400)
        except StorageError:
            flash("Failed to save employee data", "danger")
            return render_form(form, 500)

        url = profile_url(base_url(), employee_id)
        return render_template(
            "created.html",
            employee=record,
            employee_id=employee_id,
            profile_url=url,
            qr_data_url=make_qr_data_url(url),
        )

    # ------------------------------------------------------------------
    # HTML: public profile and downloads
    # ------------------------------------------------------------------
    @app.route("/employee/<employee_id>", endpoint="employee_profile")
    def employee_profile(employee_id: str):
        try:
            employee = service.get(employee_id)
        except (ValidationError, EmployeeNotFoundError):
            return render_template("404.html"), 404
        except StorageError:
            return render_template("500.html"), 500

        return render_template("profile.html", employee=employee, employee_id=employee_id)

    @app.route("/employee/<employee_id>/vcard", endpoint="employee_vcard")
    def employee_vcard(employee_id: str):
        try:
            employee = service.get(employee_id)
        except (ValidationError, EmployeeNotFoundError):
            return render_template("404.html"), 404
        except StorageError:
            return render_template("500.html"), 500

        buf = io.BytesIO(build_vcard(employee).encode("utf-8"))
        return send_file(buf, mimetype=VCARD_MIMETYPE, as_attachment=True, download_name=vcard_filename(employee))

    @app.route("/employee/<employee_id>/qr.png", endpoint="employee_qr")
    def employee_qr(employee_id: str):
        try:
            employee = service.get(employee_id)
        except (ValidationError, EmployeeNotFoundError):
            return render_template("404.html"), 404
        except StorageError:
            return render_template("500.html"), 500

        png = make_qr_png(profile_url(base_url(), employee_id))
        return send_file(io.BytesIO(png), mimetype="image/png", as_attachment=True, download_name=qr_filename(employee))

    # ------------------------------------------------------------------
    # JSON API
    # ------------------------------------------------------------------
    @app.route("/api/employees", methods=["GET", "POST"], endpoint="api_employees")
    def api_employees():
        if request.method == "GET":
            return jsonify({"message": "Use POST to save employee data"})

        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            body = {}
        employee_id = body.get("id")
        data = body.get("data")

        if not employee_id or not data:
            return jsonify({"error": "Missing id or data"}), 400
        if not isinstance(employee_id, str):
            return jsonify({"error": "Invalid employee id"}), 400

        try:
            record = EmployeeRecord.from_dict(data)
        except ValidationError:
            return jsonify({"error": "Invalid employee data"}), 400

        try:
            employee_id = service.save(employee_id, record)
        except ValidationError:
            return jsonify({"error": "Invalid employee id"}), 400
        except StorageError:
            return jsonify({"error": "Failed to save employee data"}), 500

        return jsonify({"success": True, "id": employee_id})

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="api_employee_detail")
    def api_employee_detail(employee_id: str):
        try:
            employee = service.get(employee_id)
        except ValidationError:
            if not employee_id.strip():
                return jsonify({"error": "Missing employee ID"}), 400
            return jsonify({"error": "Invalid employee ID"}), 400
        except EmployeeNotFoundError:
            return jsonify({"error": "Employee not found"}), 404
        except StorageError:
            return jsonify({"error": "Failed to fetch employee data"}), 500

        return jsonify({"employee": employee.to_dict()})
