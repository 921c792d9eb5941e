from sqlmodel import Session
from catalog_api.db.session import engine


def get_db():
    with Session(engine) as session:
        yield session
