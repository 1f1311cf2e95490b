from __future__ import annotations

import logging
import threading
from typing import Optional

from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import OperationFailure, PyMongoError

from .config import get_mongo_db_name, get_mongo_uri


logger = logging.getLogger(__name__)

BLOG_POSTS_COLLECTION = "blogposts"

# 사이트 요청 경로에서 연결을 시도하므로 서버 선택 대기를 짧게 둔다.
SERVER_SELECTION_TIMEOUT_MS = 3000

# IndexOptionsConflict, IndexKeySpecsConflict
INDEX_CONFLICT_CODES = (85, 86)


_client: Optional[MongoClient] = None
_db: Optional[Database] = None
_lock = threading.Lock()


def get_client() -> MongoClient:
    """전역 MongoClient 싱글톤을 반환한다.

    - MONGO_URI 에서 URI 를 읽어온다.
    - ping 으로 연결을 검증한다. 실패하면 RuntimeError.
    - blogposts 컬렉션 인덱스를 한 번만 생성한다.
    """

    global _client, _db

    if _client is not None:
        return _client

    with _lock:
        if _client is not None:
            return _client

        uri = get_mongo_uri()
        client: MongoClient = MongoClient(
            uri, serverSelectionTimeoutMS=SERVER_SELECTION_TIMEOUT_MS
        )

        try:
            client.admin.command("ping")
        except PyMongoError as exc:
            client.close()
            raise RuntimeError(f"failed to connect to MongoDB: {exc}") from exc

        db_name = get_mongo_db_name()
        try:
            db = client[db_name] if db_name else client.get_default_database()
        except PyMongoError as exc:
            client.close()
            raise RuntimeError(
                "MongoDB database name must be specified via MONGO_DB_NAME or in MONGO_URI (mongodb://.../db_name)",
            ) from exc

        try:
            _ensure_indexes(db)
        except PyMongoError:
            client.close()
            logger.error("failed to ensure MongoDB indexes", exc_info=True)
            raise

        _client = client
        _db = db
        logger.info("MongoDB connected and indexes ensured (db=%s)", db.name)
        return _client


def get_database() -> Database:
    """전역 기본 Database 객체를 반환한다."""

    if _db is None:
        get_client()
    assert _db is not None  # get_client 가 실패했다면 이미 예외가 발생했다.
    return _db


def close_client() -> None:
    """애플리케이션 종료 시 연결을 정리한다."""

    global _client, _db

    with _lock:
        if _client is not None:
            _client.close()
        _client = None
        _db = None


def _ensure_indexes(db: Database) -> None:
    """blogposts 컬렉션의 조회 패턴에 맞는 인덱스를 만든다. (idempotent)

    이름은 지정하지 않는다. 기본 이름(slug_1 등)이 mongoose autoIndex 가 만든
    이름과 같아야 기존 컬렉션에서 create_index 가 no-op 이 된다.
    """

    posts = db[BLOG_POSTS_COLLECTION]

    _create_index(posts, [("slug", ASCENDING)], unique=True)

    # 발행 글 목록: published=true, publishedAt desc
    _create_index(posts, [("published", ASCENDING), ("publishedAt", DESCENDING)])

    _create_index(posts, [("tags", ASCENDING)])


def _create_index(collection: Collection, keys: list[tuple[str, int]], **kwargs) -> None:
    """같은 키의 인덱스가 다른 이름/옵션으로 이미 있으면 그대로 둔다."""

    try:
        collection.create_index(keys, **kwargs)
    except OperationFailure as exc:
        if exc.code not in INDEX_CONFLICT_CODES:
            raise
        logger.info(
            "MongoDB index on %s already exists, keeping it: %s",
            [key for key, _ in keys],
            exc,
            extra={"store": "mongo"},
        )
