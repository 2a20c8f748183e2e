from sqlalchemy import Column, Integer, String, Text, Boolean, Date, DateTime, func, true
from . import Base

class Post(Base):
    __tablename__ = 'posts'
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=True)
    breed = Column(String(255), nullable=True)
    age = Column(Integer, nullable=True)
    cause = Column(String(255), nullable=True)
    message = Column(Text, nullable=True)
    date = Column(String(255), nullable=True)  # free-form anniversary, e.g. 2024-08-12
    password = Column(String(255), nullable=True)
    is_public = Column(Boolean, nullable=False, server_default=true())
    expose_until = Column(Date, nullable=True)
    lang = Column(String(16), nullable=False, server_default='ko')
    image_url = Column(String(1024), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
