from __future__ import annotations

import os


MONGO_URI_ENV = "MONGO_URI"
MONGO_DB_NAME_ENV = "MONGO_DB_NAME"


def get_mongo_uri() -> str:
    """블로그 저장소(MongoDB) 연결 URI 를 반환한다.

    환경 변수에서만 읽는다. 설정되지 않았으면 RuntimeError 를 발생시키고,
    호출하는 서비스 레이어가 이를 "저장소 없음" 으로 처리한다.
    """

    value = os.getenv(MONGO_URI_ENV, "").strip()
    if not value:
        raise RuntimeError(
            f"{MONGO_URI_ENV} environment variable is required for MongoDB",
        )
    return value


def get_mongo_db_name() -> str | None:
    """사용할 데이터베이스 이름. 비어 있으면 URI 의 기본 DB 를 사용한다."""

    value = os.getenv(MONGO_DB_NAME_ENV, "").strip()
    return value or None
