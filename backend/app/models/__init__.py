from app.models.match import MatchRecord, TeamRecord

__all__ = ["MatchRecord", "TeamRecord"]
