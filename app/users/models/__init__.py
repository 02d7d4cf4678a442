from app.users.models.user_model import User, USER_ROLES
