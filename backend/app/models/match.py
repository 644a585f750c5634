from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from app.core.database import Base

class TeamRecord(Base):
    __tablename__ = "teams"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    short_name = Column(String(5), nullable=False)
    logo = Column(String, nullable=False)
    league = Column(String, nullable=False)
    country = Column(String, nullable=False)

class MatchRecord(Base):
    __tablename__ = "matches"

    # Surrogate key doubles as insertion order for stable kickoff sorting
    id = Column(Integer, primary_key=True, autoincrement=True)
    match_id = Column(String, unique=True, index=True, nullable=False)
    home_team_id = Column(String, ForeignKey("teams.id"), nullable=False)
    away_team_id = Column(String, ForeignKey("teams.id"), nullable=False)
    kickoff_time = Column(DateTime(timezone=True), index=True, nullable=False)
    status = Column(String, nullable=False)
    venue = Column(String, nullable=True)
    league = Column(String, index=True, nullable=False)
    season = Column(String, nullable=False)
    prediction_status = Column(String, index=True, nullable=False)
    prediction_deadline = Column(DateTime(timezone=True), nullable=False)

    home_team = relationship("TeamRecord", foreign_keys=[home_team_id], lazy="joined")
    away_team = relationship("TeamRecord", foreign_keys=[away_team_id], lazy="joined")
