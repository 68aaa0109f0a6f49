"""Pytest fixtures for portfolio-intel tests."""

import json

import httpx
import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment variables out of base URL / timeout resolution."""
    monkeypatch.delenv("PORTFOLIO_API_BASE", raising=False)
    monkeypatch.delenv("PORTFOLIO_API_TIMEOUT", raising=False)


@pytest.fixture
def thm_payload() -> dict:
    """Realistic /api/tryhackme response: envelope, public profile, raw skills and normalized matrix."""
    return {
        "enabled": True,
        "data": {
            "publicProfile": {
                "status": "success",
                "data": {
                    "username": "phantom",
                    "rank": 48213,
                    "completedRoomsNumber": 42,
                    "badgesNumber": 11,
                    "completedRooms": [
                        {"title": "Pickle Rick", "slug": "picklerick"},
                        {"name": "Blue"},
                        "Vulnversity",
                        {"slug": ""},
                        5,
                    ],
                },
            },
            "skillsResponse": {
                "role": "Foundational",
                "segment": "entry",
                "data": {"skills": [{"name": "ignored", "value": 99}]},
            },
            "skillsMatrix": [
                {"name": "Red Teaming", "value": 35},
                {"name": "Security Operations", "value": 0.8},
                {"name": "Malware Analysis", "value": 12},
            ],
            "skillsError": "",
        },
    }


@pytest.fixture
def disabled_payload() -> dict:
    return {"enabled": False, "message": "Set THM_USERNAME to enable TryHackMe stats."}


@pytest.fixture
def profile_doc() -> dict:
    """Sample /api/profile document (camelCase as served by the backend)."""
    return {
        "displayName": "Shayden Naidoo",
        "headline": "Cybersecurity and Software Engineering",
        "bio": "Builds secure applications.",
        "cvUrl": "https://example.com/cv.pdf",
        "languages": ["Go", "Python"],
        "certifications": [
            {"name": "Security+", "issuer": "CompTIA", "date": "2025-01", "url": "https://example.com/c"}
        ],
        "experience": [
            {"role": "Intern", "company": "Acme", "dateRange": "2024 - 2025", "description": ["Shipped things"]}
        ],
    }


@pytest.fixture
def repos_doc() -> list[dict]:
    """Sample /api/repos body."""
    return [
        {
            "id": 1,
            "name": "Green-Cart",
            "fullName": "COS301-SE-2025/Green-Cart",
            "url": "https://github.com/COS301-SE-2025/Green-Cart",
            "description": "",
            "language": "TypeScript",
            "pushedAt": "2026-03-09T14:00:00Z",
            "pinned": True,
            "pinOrder": 1,
        },
        {
            "id": 2,
            "name": "city-builder",
            "url": "https://github.com/example/city-builder",
            "description": "C++ city builder",
            "language": "C++",
            "pushedAt": "2025-10-01T08:00:00Z",
        },
    ]


def _json_response(data, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(data), headers={"content-type": "application/json"})


@pytest.fixture
def json_response():
    """Factory for JSON httpx responses."""
    return _json_response


@pytest.fixture
def backend_handler(profile_doc: dict, repos_doc: list[dict], thm_payload: dict):
    """MockTransport handler serving the three read endpoints by path."""

    def handler(request: httpx.Request) -> httpx.Response:
        routes = {
            "/api/profile": profile_doc,
            "/api/repos": repos_doc,
            "/api/tryhackme": thm_payload,
        }
        if request.url.path in routes:
            return _json_response(routes[request.url.path])
        return httpx.Response(404, text="not found")

    return handler
