import logging
import uuid
from catalog_api.schemas.auth import LoginRequest, UserRole

logger = logging.getLogger(__name__)


def login(data: LoginRequest) -> dict:
    """
    Фиктивный вход: любые непустые логин и пароль.
    Токен случайный и нигде не хранится, роль всегда ADMIN.
    """
    token = str(uuid.uuid4())
    logger.info("Dummy login for %r", data.username)

    return {
        "token": token,
        "username": data.username,
        "role": UserRole.ADMIN,
    }
