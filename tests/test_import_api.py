import json

import pytest
from fastapi.testclient import TestClient

from app.auth import issue_token
from app.main import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers() -> dict:
    return {"Authorization": f"Bearer {issue_token('tester')}"}


def upload(records, *, shape: str = "data") -> dict:
    if shape == "data":
        document = {"data": {"records": records}}
    elif shape == "nested":
        document = {"data": {"data": {"records": records}}}
    else:
        document = {"records": records}
    return {"file": ("import.json", json.dumps(document).encode("utf-8"), "application/json")}


def test_login_issues_token(client):
    response = client.post(
        "/api/v1/auth/login", json={"username": "admin", "password": "test-password"}
    )

    assert response.status_code == 200
    assert response.json()["token_type"] == "bearer"


def test_login_rejects_bad_password(client):
    response = client.post("/api/v1/auth/login", json={"username": "admin", "password": "nope"})

    assert response.status_code == 401
    assert response.json()["error"] == "UNAUTHORIZED"


def test_import_requires_token(client, make_word):
    response = client.post("/api/v1/words/import", files=upload([make_word()]))

    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_health(client):
    assert client.get("/api/v1/health").json() == {"status": "healthy"}


def test_import_words(client, auth_headers, make_word):
    records = [make_word("cat"), make_word("dog"), {"word": "bad"}]

    response = client.post(
        "/api/v1/words/import",
        files=upload(records),
        params={"batchSize": 2},
        headers=auth_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["totalItems"] == 3
    assert body["totalBatches"] == 2
    assert body["totalInserted"] == 2
    assert body["totalInvalid"] == 1
    assert body["summary"]["success"] is True
    assert body["summary"]["message"] == (
        "Import completed. 2 inserted, 0 updated, 1 skipped, 0 errors"
    )
    invalid = body["batches"][1]["results"][0]
    assert invalid["status"] == "invalid"
    assert invalid["action"] == "skipped"
    assert invalid["validationResult"]["isValid"] is False

    listed = client.get("/api/v1/words/", headers=auth_headers).json()
    assert sorted(word["word"] for word in listed) == ["cat", "dog"]


def test_validate_only_returns_report(client, auth_headers, make_lecture):
    records = [make_lecture("one"), make_lecture("two", level="Z1")]

    response = client.post(
        "/api/v1/lectures/import",
        files=upload(records, shape="flat"),
        params={"validateOnly": "true"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["totalItems"] == 2
    assert body["valid"] == 1
    assert body["invalid"] == 1
    assert [r["status"] for r in body["validationResults"]] == ["valid", "invalid"]
    assert "action" not in body["validationResults"][0]
    assert client.get("/api/v1/lectures/", headers=auth_headers).json() == []


@pytest.mark.parametrize(
    "params",
    [
        {"batchSize": 0},
        {"batchSize": 101},
        {"duplicateStrategy": "replace"},
        {"validateOnly": "maybe"},
    ],
)
def test_rejects_bad_parameters(client, auth_headers, make_word, params):
    response = client.post(
        "/api/v1/words/import", files=upload([make_word()]), params=params, headers=auth_headers
    )

    assert response.status_code == 422
    assert client.get("/api/v1/words/", headers=auth_headers).json() == []


def test_rejects_unknown_file_structure(client, auth_headers, make_word):
    content = json.dumps({"items": [make_word()]}).encode("utf-8")

    response = client.post(
        "/api/v1/words/import",
        files={"file": ("words.json", content, "application/json")},
        headers=auth_headers,
    )

    assert response.status_code == 422
    assert response.json()["error"] == "INVALID_IMPORT_FILE"
    assert response.json()["message"].startswith("Invalid file structure")


def test_rejects_malformed_json(client, auth_headers):
    response = client.post(
        "/api/v1/expressions/import",
        files={"file": ("broken.json", b"{", "application/json")},
        headers=auth_headers,
    )

    assert response.status_code == 422
    assert response.json()["message"] == "Invalid JSON file format"


def test_export_then_import_round_trip(client, auth_headers, make_word):
    client.post(
        "/api/v1/words/import",
        files=upload(
            [
                make_word("cat", IPA="kæt", spanish={"word": "gato"}),
                make_word("dog", codeSwitching=["perro"]),
            ]
        ),
        headers=auth_headers,
    )

    export = client.get("/api/v1/words/export", headers=auth_headers).json()
    assert export["data"]["totalWords"] == 2
    assert "exportDate" in export["data"]

    response = client.post(
        "/api/v1/words/import",
        files={"file": ("export.json", json.dumps(export).encode("utf-8"), "application/json")},
        params={"duplicateStrategy": "overwrite"},
        headers=auth_headers,
    )

    body = response.json()
    assert body["totalUpdated"] == 2
    assert body["totalInserted"] == 0
    assert body["totalInvalid"] == 0

    again = client.get("/api/v1/words/export", headers=auth_headers).json()
    strip = {"updatedAt"}
    assert [
        {k: v for k, v in record.items() if k not in strip} for record in again["data"]["records"]
    ] == [
        {k: v for k, v in record.items() if k not in strip} for record in export["data"]["records"]
    ]


def test_import_accepts_wrapped_export_envelope(client, auth_headers, make_expression):
    response = client.post(
        "/api/v1/expressions/import",
        files=upload([make_expression("piece of cake")], shape="nested"),
        headers=auth_headers,
    )

    assert response.json()["totalInserted"] == 1


def test_error_strategy_reports_failure(client, auth_headers, make_word):
    client.post("/api/v1/words/import", files=upload([make_word("cat")]), headers=auth_headers)

    response = client.post(
        "/api/v1/words/import",
        files=upload([make_word("cat")]),
        params={"duplicateStrategy": "error"},
        headers=auth_headers,
    )

    body = response.json()
    assert response.status_code == 200
    assert body["totalErrors"] == 1
    assert body["totalDuplicates"] == 1
    assert body["summary"]["success"] is False
    assert body["batches"][0]["results"][0]["error"] == "Duplicate word found"


def test_unknown_word_is_not_found(client, auth_headers):
    response = client.get("/api/v1/words/missing-id", headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["error"] == "NOT_FOUND"


def test_create_conflicts_with_existing_word(client, auth_headers):
    payload = {"word": "cat", "language": "en", "type": ["noun"]}

    created = client.post("/api/v1/words/", json=payload, headers=auth_headers)
    duplicate = client.post("/api/v1/words/", json=payload, headers=auth_headers)

    assert created.status_code == 201
    assert created.json()["difficulty"] == "hard"
    assert duplicate.status_code == 409


def strip_timestamps(records: list[dict]) -> list[dict]:
    return [{k: v for k, v in record.items() if k != "updatedAt"} for record in records]


def test_badly_typed_lists_are_rejected_and_reads_keep_working(client, auth_headers, make_word):
    response = client.post(
        "/api/v1/words/import",
        files=upload([make_word("cat", examples=[1, 2]), make_word("dog", seen=2.5)]),
        headers=auth_headers,
    )

    body = response.json()
    assert body["totalInserted"] == 0
    assert body["totalInvalid"] == 2
    assert client.get("/api/v1/words/", headers=auth_headers).json() == []
    export = client.get("/api/v1/words/export", headers=auth_headers)
    assert export.status_code == 200
    assert export.json()["data"]["totalWords"] == 0


def test_lecture_export_then_import_round_trip(client, auth_headers, make_lecture):
    client.post(
        "/api/v1/lectures/import",
        files=upload(
            [
                make_lecture("First passage", time=12, urlAudio="https://cdn/a.mp3"),
                make_lecture("Second passage", level="C2", img="https://cdn/b.png"),
            ]
        ),
        headers=auth_headers,
    )
    export = client.get("/api/v1/lectures/export", headers=auth_headers).json()
    assert export["data"]["totalLectures"] == 2

    response = client.post(
        "/api/v1/lectures/import",
        files={"file": ("export.json", json.dumps(export).encode("utf-8"), "application/json")},
        params={"duplicateStrategy": "overwrite"},
        headers=auth_headers,
    )

    assert response.json()["totalUpdated"] == 2
    again = client.get("/api/v1/lectures/export", headers=auth_headers).json()
    assert strip_timestamps(again["data"]["records"]) == strip_timestamps(
        export["data"]["records"]
    )


def test_expression_export_then_import_round_trip(client, auth_headers, make_expression):
    client.post(
        "/api/v1/expressions/import",
        files=upload(
            [
                make_expression(
                    "break the ice",
                    examples=["A joke helps break the ice"],
                    context="Social situations",
                    spanish={"expression": "romper el hielo"},
                ),
                make_expression("spill the beans", difficulty="medium"),
            ]
        ),
        headers=auth_headers,
    )
    export = client.get("/api/v1/expressions/export", headers=auth_headers).json()
    assert export["data"]["totalExpressions"] == 2

    response = client.post(
        "/api/v1/expressions/import",
        files={"file": ("export.json", json.dumps(export).encode("utf-8"), "application/json")},
        params={"duplicateStrategy": "overwrite"},
        headers=auth_headers,
    )

    body = response.json()
    assert body["totalUpdated"] == 2
    assert body["totalInvalid"] == 0
    again = client.get("/api/v1/expressions/export", headers=auth_headers).json()
    assert strip_timestamps(again["data"]["records"]) == strip_timestamps(
        export["data"]["records"]
    )
