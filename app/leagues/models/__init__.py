from app.leagues.models.leagues_models import League, league_teams, LEAGUE_STATUSES
