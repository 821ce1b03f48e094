from __future__ import annotations

import json
from pathlib import Path

from scripts.validate_documents import check_document, main


def _write(path: Path, payload) -> Path:
    path.write_text(json.dumps(payload))
    return path


def test_valid_documents_pass(tmp_path: Path, capsys) -> None:
    doc = _write(tmp_path / "meta.json", {"machine_id": "bambu_p1p", "experience": "Beginner"})
    assert main(["--schema", "analyze_request", str(doc)]) == 0
    assert capsys.readouterr().out.strip().endswith("OK")


def test_invalid_documents_are_listed(tmp_path: Path, capsys) -> None:
    good = _write(tmp_path / "good.json", {"machine_id": "a", "experience": "Advanced"})
    bad = _write(tmp_path / "bad.json", {"machine_id": "", "experience": "Expert"})
    assert main(["--schema", "analyze", str(good), str(bad)]) == 1
    out = capsys.readouterr().out
    assert f"Invalid: {bad}" in out
    assert "  machine_id is not a string of length 1..128" in out
    assert "  experience is not an element of {'Advanced', 'Beginner', 'Intermediate'}" in out
    assert "1 invalid files" in out


def test_yaml_documents_and_module_schemas(tmp_path: Path, capsys) -> None:
    doc = tmp_path / "meta.yaml"
    doc.write_text("machine_id: voron_24\nexperience: Intermediate\nmaterial: PETG\n")
    assert main(["--schema", "nestcheck.schemas.builtin:ANALYZE_REQUEST", str(doc)]) == 0


def test_unreadable_documents_count_as_failures(tmp_path: Path, capsys) -> None:
    doc = tmp_path / "broken.json"
    doc.write_text("{")
    assert main(["--schema", "analyze_request", str(doc)]) == 1
    assert "Unreadable" in capsys.readouterr().out


def test_strict_modes() -> None:
    schema = {"a": {"b": int}}
    document = {"a": {"b": 1, "c": 2}}
    assert check_document(document, schema) == []
    assert check_document(document, schema, shallow_strict=True) == []
    errors = check_document(document, schema, strict=True, verbose=True)
    assert [str(entry) for entry in errors] == [
        "a is not valid: contains members 'c' not specified in schema"
    ]


def test_non_mapping_document() -> None:
    errors = check_document([1, 2], {"a": int})
    assert [str(entry) for entry in errors] == ["Top level is not a mapping"]


def test_registered_strictness_is_the_default(tmp_path: Path, capsys) -> None:
    doc = _write(
        tmp_path / "meta.json",
        {"machine_id": "bambu_p1p", "experience": "Beginner", "debug": True},
    )
    assert main(["--schema", "analyze_request", str(doc)]) == 1
    out = capsys.readouterr().out
    assert "  Top level is not valid: contains members not specified in schema" in out

    assert main(["--schema", "analyze_request", "--no-strict", str(doc)]) == 0
    assert main(["--schema", "nestcheck.schemas.builtin:ANALYZE_REQUEST", str(doc)]) == 0
