from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from academy.main import create_app
from academy.web.catalog import list_courses


@pytest.fixture()
def client() -> TestClient:
    return TestClient(create_app(run_migrations=False))


def test_courses_page_layout(client: TestClient) -> None:
    response = client.get("/courses")
    html = response.text

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert html.count("<header") == 1
    assert html.count("<main>") == 1
    assert html.count("<footer") == 1
    assert html.index("<header") < html.index("<main>") < html.index("<footer")


def test_courses_page_lists_every_course_inside_main(client: TestClient) -> None:
    html = client.get("/courses").text
    main = html[html.index("<main>"):html.index("</main>")]

    assert main.count('<li class="course">') == len(list_courses())
    assert "Quranic Arabic" in main
    assert "Quran &amp; Tajweed for Beginners" in main


def test_courses_page_is_stable(client: TestClient) -> None:
    assert client.get("/courses").text == client.get("/courses").text


@pytest.mark.parametrize("path", ["/nowhere", "/students/42", "/courses/extra"])
def test_unknown_paths_render_not_found_page(client: TestClient, path: str) -> None:
    response = client.get(path)
    html = response.text

    assert response.status_code == 404
    assert "<h1>404 - Page Not Found</h1>" in html
    assert "The page you're looking for doesn't exist." in html
    assert '<a href="/">Go back home</a>' in html
