"""Schemas shipped with the service.

``machine_profile`` describes a printer/CNC profile document and
``analyze_request`` the metadata a client submits with a diagnostics image.
"""
from __future__ import annotations

import re
from numbers import Number

from nestcheck.validation import OPTIONAL, Range, all_of, array_length, length, none_of, string_length

from .registry import RegisteredSchema

_IDENTIFIER = re.compile(r"\A[a-z0-9][a-z0-9_]*\Z")
_MATERIAL = re.compile(r"\A[A-Z][A-Z0-9+-]{1,15}\Z")
NoneType = type(None)


def _positive(value):
    if isinstance(value, Number) and not isinstance(value, bool) and value > 0:
        return True
    return "a positive number"


_speed_range = array_length(2, Range(0.0, 2000.0))

MACHINE_PROFILE = {
    "id": all_of(_IDENTIFIER, none_of({"default", "none"})),
    "brand": string_length(Range(1, 64)),
    "model": string_length(Range(1, 64)),
    "type": {"FDM", "SLA", "CNC"},
    "aliases": [OPTIONAL, [[str]]],
    "motion_system": [OPTIONAL, {"BedSlinger", "CoreXY", "IDEX", "Delta", "Gantry"}],
    "enclosed": [OPTIONAL, bool],
    "build_volume_mm": [OPTIONAL, array_length(3, _positive)],
    "workarea_mm": [OPTIONAL, array_length(3, _positive)],
    "nozzle_diameters": [OPTIONAL, [[Range(0.1, 2.0)]]],
    "max_nozzle_temp_c": [OPTIONAL, Range(0, 500)],
    "max_bed_temp_c": [OPTIONAL, Range(0, 200)],
    "spindle_rpm_range": [OPTIONAL, array_length(2, Range(0, 100000))],
    "max_feed_mm_min": [OPTIONAL, _positive],
    "safe_speed_ranges": [
        OPTIONAL,
        {
            "print": [OPTIONAL, _speed_range],
            "travel": [OPTIONAL, _speed_range],
            "accel": [OPTIONAL, array_length(2, Range(0.0, 100000.0))],
        },
    ],
    "material_presets": [OPTIONAL, dict],
    "supports": [OPTIONAL, dict],
    "capabilities": [OPTIONAL, [[str]]],
    "rigidity_class": [OPTIONAL, {"light", "medium", "heavy"}],
    "notes": [OPTIONAL, str, NoneType],
}

ANALYZE_REQUEST = {
    "machine_id": string_length(Range(1, 128)),
    "experience": {"Beginner", "Intermediate", "Advanced"},
    "material": [OPTIONAL, NoneType, _MATERIAL],
    "base_profile": [OPTIONAL, NoneType, all_of(dict, length(Range(1, 256)))],
    "app_version": [OPTIONAL, NoneType, re.compile(r"\A\d+\.\d+(\.\d+)?\Z")],
}

SCHEMAS = (
    RegisteredSchema(
        name="machine_profile",
        schema=MACHINE_PROFILE,
        aliases=("machine", "printer profile"),
        description="Printer or CNC machine profile",
    ),
    RegisteredSchema(
        name="analyze_request",
        schema=ANALYZE_REQUEST,
        aliases=("analyze", "analyze meta"),
        description="Metadata submitted with an analyze request",
        options={"strict": True},
    ),
)

__all__ = ["ANALYZE_REQUEST", "MACHINE_PROFILE", "SCHEMAS"]
