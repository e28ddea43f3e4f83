# app/database.py
from sqlmodel import SQLModel, create_engine

from app.core.config import get_settings

settings = get_settings()

# ---------------------------------------------------------
# Local SQLite database (only used by the "database" cart store)
#
# - check_same_thread=False: FastAPI runs sync endpoints in a
#   threadpool, so a connection may be used from another thread
# - pool_pre_ping=True: validate connections before using them
# ---------------------------------------------------------

db_url = settings.DATABASE_URL

connect_args = {}
if db_url.startswith("sqlite"):
    connect_args["check_same_thread"] = False

engine = create_engine(
    db_url,
    echo=False,        # set to True if you want to debug SQL queries
    pool_pre_ping=True,
    connect_args=connect_args,
)


def create_db_and_tables(bind=None) -> None:
    """
    Create all tables defined in SQLModel metadata if they do not exist.

    Called on application startup when the database cart store is used.
    """
    SQLModel.metadata.create_all(bind or engine)

