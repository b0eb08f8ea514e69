# galleryfeed/services/api/deps.py
from __future__ import annotations
from typing import Generator
from fastapi import Depends
from sqlalchemy.orm import Session

from galleryfeed.database.core.main import SessionLocal
from galleryfeed.database.repos.feed_repo import SqlAlchemyFeedRepo
from galleryfeed.domain.ports.feed import MediaFeedPort
from galleryfeed.services.feed.service import FeedService


def get_db() -> Generator[Session, None, None]:
    """
    Request-scoped session. Feed endpoints only read, so the transaction is
    always rolled back on the way out.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.close()


def get_feed_repo(db: Session = Depends(get_db)) -> MediaFeedPort:
    """
    Provide a MediaFeedPort implementation via DI.
    Tests override this with an in-memory fake.
    """
    return SqlAlchemyFeedRepo(db)


def get_feed_service(repo: MediaFeedPort = Depends(get_feed_repo)) -> FeedService:
    return FeedService(repo)
