from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from dotenv import load_dotenv

from .core.config import settings

# Carrega o .env local para que DATABASE_URL e afins fiquem visíveis ao processo
load_dotenv()

# As conexões SQLite são partilhadas com as threads do FastAPI
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)

# Fábrica de sessões, uma sessão por pedido
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

# Classe base para os modelos ORM
Base = declarative_base()
