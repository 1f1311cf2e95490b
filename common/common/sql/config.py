from __future__ import annotations

import os


DATABASE_URL_ENV = "DATABASE_URL"
DATABASE_ECHO_ENV = "DATABASE_ECHO"


def get_database_url() -> str:
    """프로젝트 저장소(관계형 DB)의 SQLAlchemy URL 을 반환한다.

    mongo 설정과 동일하게 환경 변수에서만 읽고, 없으면 RuntimeError.
    """

    value = os.getenv(DATABASE_URL_ENV, "").strip()
    if not value:
        raise RuntimeError(
            f"{DATABASE_URL_ENV} environment variable is required for the project store",
        )
    return value


def get_database_echo() -> bool:
    return os.getenv(DATABASE_ECHO_ENV, "").strip().lower() in {"1", "true", "yes"}
