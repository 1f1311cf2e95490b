from __future__ import annotations

import logging
import threading
from typing import Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from .config import get_database_echo, get_database_url


logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """SQLAlchemy 모델 베이스 클래스"""

    pass


_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker[Session]] = None
_lock = threading.Lock()


def get_engine() -> Engine:
    """전역 Engine 싱글톤을 반환한다.

    create_engine 은 실제 연결을 만들지 않으므로 DB 가 내려가 있어도 여기서는
    실패하지 않는다. 연결 실패는 첫 쿼리에서 SQLAlchemyError 로 드러난다.
    """

    global _engine

    if _engine is not None:
        return _engine

    with _lock:
        if _engine is None:
            url = get_database_url()
            _engine = create_engine(url, echo=get_database_echo(), pool_pre_ping=True)
            logger.info("SQL engine created (dialect=%s)", _engine.dialect.name)
    return _engine


def get_session_factory() -> sessionmaker[Session]:
    global _session_factory

    if _session_factory is None:
        _session_factory = sessionmaker(
            get_engine(),
            expire_on_commit=False,
            autoflush=False,
        )
    return _session_factory


def dispose_engine() -> None:
    """애플리케이션 종료 시 커넥션 풀을 정리한다."""

    global _engine, _session_factory

    with _lock:
        if _engine is not None:
            _engine.dispose()
        _engine = None
        _session_factory = None
