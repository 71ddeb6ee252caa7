# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""SQLAlchemy engine singleton and the person table definition."""
from sqlalchemy import Column, Integer, MetaData, String, Table, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from person_service.core.config import settings
from person_service.core.logging import get_logger

logger = get_logger(__name__)

metadata = MetaData()

person_table = Table(
    "person",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=True),
    Column("email", String(255), nullable=True),
)


def build_engine(url: str) -> Engine:
    """Create an engine with pool settings suited to the backing database."""
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # one shared connection, otherwise every pooled connection sees its own empty database
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=settings.POOL_SIZE,
        max_overflow=settings.MAX_OVERFLOW,
        pool_recycle=settings.POOL_RECYCLE,
    )


def create_schema(bind: Engine) -> None:
    metadata.create_all(bind, checkfirst=True)
    logger.info("Schema ready on %s", bind.url.render_as_string(hide_password=True))


engine = build_engine(settings.DATABASE_URL)
