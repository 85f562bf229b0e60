from gradetrack.db.base import Base
from gradetrack.db.session import engine


def init_db() -> None:
    Base.metadata.create_all(bind=engine)
