"""Purchase model — immutable audit record of every purchase."""

from sqlalchemy import Column, Integer, String, BigInteger

from promptvault.database import Base


class Purchase(Base):
    __tablename__ = "purchases"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Plain ids rather than foreign keys: the log outlives deleted prompts
    prompt_id = Column(Integer, nullable=False, index=True)
    buyer = Column(String(128), nullable=False, index=True)
    seller = Column(String(128), nullable=False, index=True)
    price = Column(BigInteger, nullable=False)
    timestamp = Column(BigInteger, nullable=False)
