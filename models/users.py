from sqlalchemy import Column, String
from database.db import Base

class User(Base):
    __tablename__ = "users"  # mirror of the hosted auth identity

    id = Column(String(36), primary_key=True)                 # auth provider user id (uuid)
    email = Column(String(255), nullable=False)               # login e-mail
    token_hash = Column(String(64), unique=True, index=True)  # sha256 of the bearer token
