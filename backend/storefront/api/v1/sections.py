# storefront/api/v1/sections.py
from flask import request, jsonify
from storefront.application.sections import (
    list_sections as list_all_sections,
    create_section as create_section_record,
    patch_section as patch_section_record,
    delete_section as delete_section_record,
)
from storefront.domain.exceptions import ValidationError
from storefront.normalizers.section import normalize_section
from . import v1_bp # import the versioned blueprint


def _json_object():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


@v1_bp.route("/sections", methods=["GET"])
def list_sections():
    return jsonify({
        "items": [normalize_section(s) for s in list_all_sections()]
    })


@v1_bp.route("/sections", methods=["POST"])
def create_section():
    data = _json_object()

    section = create_section_record(
        type=data.get("type"),
        order=data.get("order"),
        content=data.get("content"),
        is_active=data.get("isActive", True),
    )

    return jsonify(normalize_section(section)), 201


@v1_bp.route("/sections/<section_id>", methods=["PATCH"])
def patch_section(section_id):
    data = _json_object()
    section = patch_section_record(section_id=section_id, data=data)
    return jsonify(normalize_section(section)), 200


@v1_bp.route("/sections/<section_id>", methods=["DELETE"])
def delete_section(section_id):
    delete_section_record(section_id=section_id)
    return "", 204
