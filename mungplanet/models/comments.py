from sqlalchemy import Column, Integer, String, Text, DateTime, func
from . import Base

class Comment(Base):
    __tablename__ = 'comments'
    id = Column(Integer, primary_key=True, index=True)
    # Plain column: deleting a post must leave its comments in place.
    post_id = Column(Integer, index=True, nullable=False)
    name = Column(String(255), nullable=True)
    text = Column(Text, nullable=False)
    password = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
