"""Database package: engine factory, session maker, request-scoped session."""

from app.db.session import async_session_maker, build_engine, build_session_maker, get_db

__all__ = ["async_session_maker", "build_engine", "build_session_maker", "get_db"]
