from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from app.config import AppConfig, SiteConfig, get_config
from app.main import app
from app.services.blog_service import get_blog_post_repository
from app.services.projects_service import get_project_repository
from app.services.resume_service import get_resume_repository
from common.models.blog_post import BlogPostDetail, BlogPostSummary
from common.models.project import ProjectDetail, ProjectSummary
from common.models.resume import Certification, Education, Experience, Skill


POSTS = [
    BlogPostSummary(
        id="p1",
        title="Next.js MDX Setup",
        slug="nextjs-mdx-setup",
        excerpt="Wiring up MDX",
        author="Thomas Goodman",
        published_at=datetime(2024, 5, 1, tzinfo=timezone.utc),
        tags=["Next.js", "MDX"],
        category="Engineering",
    ),
    BlogPostSummary(
        id="p2",
        title="MongoDB with Mongoose",
        slug="mongodb-with-mongoose",
        author="Thomas Goodman",
        tags=["MongoDB"],
        category="Backend",
    ),
]

PROJECTS = [
    ProjectSummary(
        id="1",
        title="React Project",
        slug="react-project",
        description="A React application",
        technologies=["React", "TypeScript"],
        category="Web App",
        featured=True,
    ),
    ProjectSummary(
        id="2",
        title="Node API",
        slug="node-api",
        description="A Node.js API",
        technologies=["Node.js", "Express"],
        category="API",
    ),
]


class StubBlogPostRepository:
    def list_published(self) -> list[BlogPostSummary]:
        return list(POSTS)

    def find_published_by_slug(self, slug: str) -> BlogPostDetail | None:
        for post in POSTS:
            if post.slug == slug:
                return BlogPostDetail(**post.model_dump(), content="# MDX body")
        return None


class StubProjectRepository:
    def list_published(self) -> list[ProjectSummary]:
        return list(PROJECTS)

    def find_published_by_slug(self, slug: str) -> ProjectDetail | None:
        for project in PROJECTS:
            if project.slug == slug:
                return ProjectDetail(**project.model_dump(), images=["a.png"])
        return None

    def list_published_slugs(self) -> list[tuple[str, datetime | None]]:
        return [(project.slug, None) for project in PROJECTS]


class StubResumeRepository:
    def list_experiences(self) -> list[Experience]:
        return [
            Experience(
                id="e1",
                title="Lead",
                company="Now Co",
                start_date=datetime(2020, 1, 1, tzinfo=timezone.utc),
                current=True,
            )
        ]

    def list_education(self) -> list[Education]:
        return []

    def list_certifications(self) -> list[Certification]:
        return [
            Certification(
                id="c1",
                name="Cloud Practitioner",
                issuer="AWS",
                issue_date=datetime(2023, 1, 1, tzinfo=timezone.utc),
            )
        ]

    def list_skills(self) -> list[Skill]:
        return [Skill(id="s1", name="Python", category="backend", proficiency=90)]


def _site_config() -> AppConfig:
    return AppConfig(
        site=SiteConfig(base_url="https://example.com", title="Test", author="Tester")
    )


@pytest.fixture
def client() -> Iterator[TestClient]:
    app.dependency_overrides[get_blog_post_repository] = StubBlogPostRepository
    app.dependency_overrides[get_project_repository] = StubProjectRepository
    app.dependency_overrides[get_resume_repository] = StubResumeRepository
    app.dependency_overrides[get_config] = _site_config
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def offline_client() -> Iterator[TestClient]:
    """두 저장소 모두 연결할 수 없는 상황."""

    app.dependency_overrides[get_blog_post_repository] = lambda: None
    app.dependency_overrides[get_project_repository] = lambda: None
    app.dependency_overrides[get_resume_repository] = lambda: None
    app.dependency_overrides[get_config] = _site_config
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_request_id_is_echoed(client: TestClient) -> None:
    response = client.get("/api/v1/blog/posts", headers={"X-Request-Id": "req-1"})

    assert response.headers["X-Request-Id"] == "req-1"
    assert response.headers["X-Span-Id"] == "0"


def test_list_blog_posts_without_filters(client: TestClient) -> None:
    response = client.get("/api/v1/blog/posts")

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 2
    assert [item["slug"] for item in body["items"]] == [
        "nextjs-mdx-setup",
        "mongodb-with-mongoose",
    ]
    assert body["items"][0]["published_at"] == "2024-05-01T00:00:00+00:00"


def test_list_blog_posts_with_search(client: TestClient) -> None:
    response = client.get("/api/v1/blog/posts", params={"search": "mongo"})

    assert [item["slug"] for item in response.json()["items"]] == [
        "mongodb-with-mongoose"
    ]


def test_list_blog_posts_accepts_all_sentinel(client: TestClient) -> None:
    response = client.get(
        "/api/v1/blog/posts", params={"category": "all", "tag": "MDX"}
    )

    assert [item["slug"] for item in response.json()["items"]] == ["nextjs-mdx-setup"]


def test_get_blog_post(client: TestClient) -> None:
    response = client.get("/api/v1/blog/posts/mongodb-with-mongoose")

    assert response.status_code == 200
    assert response.json()["content"] == "# MDX body"


def test_get_blog_post_not_found(client: TestClient) -> None:
    response = client.get("/api/v1/blog/posts/missing")

    assert response.status_code == 404


def test_list_projects_with_category_and_technologies(client: TestClient) -> None:
    response = client.get(
        "/api/v1/projects",
        params=[("category", "Web App"), ("technologies", "React")],
    )
    assert [item["slug"] for item in response.json()["items"]] == ["react-project"]

    response = client.get(
        "/api/v1/projects",
        params=[("category", "Web App"), ("technologies", "Express")],
    )
    assert response.json() == {"total": 0, "items": []}


def test_list_projects_technologies_are_or(client: TestClient) -> None:
    response = client.get(
        "/api/v1/projects",
        params=[("technologies", "React"), ("technologies", "Node.js")],
    )

    assert response.json()["total"] == 2


def test_get_project(client: TestClient) -> None:
    response = client.get("/api/v1/projects/node-api")

    assert response.status_code == 200
    assert response.json()["images"] == ["a.png"]
    assert client.get("/api/v1/projects/missing").status_code == 404


def test_filter_options(client: TestClient) -> None:
    blog = client.get("/api/v1/filters/blog").json()
    projects = client.get("/api/v1/filters/projects").json()

    assert blog["categories"] == [
        {"name": "Backend", "count": 1},
        {"name": "Engineering", "count": 1},
    ]
    assert [item["name"] for item in blog["tags"]] == ["MDX", "MongoDB", "Next.js"]
    assert [item["name"] for item in projects["technologies"]] == [
        "Express",
        "Node.js",
        "React",
        "TypeScript",
    ]


def test_sitemap(client: TestClient) -> None:
    response = client.get("/sitemap.xml")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/xml")
    assert "<loc>https://example.com/projects/node-api</loc>" in response.text
    assert "<loc>https://example.com/blog/nextjs-mdx-setup</loc>" in response.text


def test_stores_offline_degrade_to_empty_results(offline_client: TestClient) -> None:
    assert offline_client.get("/api/v1/blog/posts").json() == {"total": 0, "items": []}
    assert offline_client.get("/api/v1/projects").json() == {"total": 0, "items": []}
    assert offline_client.get("/api/v1/filters/blog").json() == {
        "categories": [],
        "tags": [],
    }
    assert offline_client.get("/api/v1/blog/posts/anything").status_code == 404
    assert offline_client.get("/api/v1/resume").json() == {
        "experiences": [],
        "education": [],
        "certifications": [],
        "skills": [],
    }

    sitemap = offline_client.get("/sitemap.xml")
    assert sitemap.status_code == 200
    assert sitemap.text.count("<url>") == 4


def test_blank_technology_params_are_ignored(client: TestClient) -> None:
    response = client.get("/api/v1/projects", params={"technologies": ""})

    assert response.json()["total"] == 2


def test_resume(client: TestClient) -> None:
    response = client.get("/api/v1/resume")

    assert response.status_code == 200
    body = response.json()
    assert [exp["title"] for exp in body["experiences"]] == ["Lead"]
    assert body["experiences"][0]["start_date"] == "2020-01-01T00:00:00+00:00"
    assert body["education"] == []
    assert body["certifications"][0]["issuer"] == "AWS"
    assert body["skills"] == [
        {
            "id": "s1",
            "name": "Python",
            "category": "backend",
            "proficiency": 90,
            "icon": None,
        }
    ]
