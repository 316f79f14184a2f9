from sqlalchemy import Column, String, Text, DateTime, JSON
from string_analyzer.database import Base


class StringRecordRow(Base):
    __tablename__ = "strings"

    id = Column(String(64), primary_key=True, index=True)  # SHA-256 hash of value
    value = Column(Text, nullable=False)
    properties = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
