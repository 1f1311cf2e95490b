from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

import yaml


DEFAULT_CONFIG_FILE_NAME = "config.yaml"
DEFAULT_BASE_URL = "http://localhost:3000"


@dataclass(slots=True)
class SiteConfig:
    base_url: str
    title: str
    author: str


@dataclass(slots=True)
class AppConfig:
    """portfolio-service 전체 설정 루트.

    DB 접속 정보는 비밀값이라 config.yaml 이 아니라 환경 변수(MONGO_URI, DATABASE_URL)로 받는다.
    """

    site: SiteConfig


def _find_config_path() -> Path:
    """현재 작업 디렉토리 기준으로 상위로 올라가며 config.yaml 을 찾는다."""

    current = Path.cwd()
    for directory in (current, *current.parents):
        candidate = directory / DEFAULT_CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate

    raise RuntimeError(
        f"{DEFAULT_CONFIG_FILE_NAME} not found. Place config.yaml in project root.",
    )


def _require_str(section: dict, key: str, path: Path, default: str) -> str:
    raw = section.get(key, default)
    if raw is None:
        return default
    if not isinstance(raw, str):
        raise RuntimeError(f"invalid site.{key} in {path}: {raw!r}")
    return raw.strip() or default


def load_site_config(path: Path | None = None) -> SiteConfig:
    path = path or _find_config_path()
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    site = data.get("site") or {}
    if not isinstance(site, dict):
        raise RuntimeError(f"invalid site section in {path}: {site!r}")

    base_url = _require_str(site, "base_url", path, DEFAULT_BASE_URL)
    if not base_url.startswith(("http://", "https://")):
        raise RuntimeError(f"invalid site.base_url in {path}: {base_url!r}")

    return SiteConfig(
        # sitemap URL 을 만들 때 "//" 가 생기지 않도록 끝 슬래시를 뗀다.
        base_url=base_url.rstrip("/"),
        title=_require_str(site, "title", path, "Portfolio"),
        author=_require_str(site, "author", path, ""),
    )


def load_config(path: Path | None = None) -> AppConfig:
    """portfolio-service 설정을 로드하여 AppConfig 로 반환한다."""

    return AppConfig(site=load_site_config(path))


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """FastAPI DI용. 프로세스당 한 번만 읽는다."""

    return load_config()
