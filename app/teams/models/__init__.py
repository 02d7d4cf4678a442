from app.teams.models.team_model import Team
