from app.matches.models.match_model import Match, MatchPlayer, MATCH_STATUSES
