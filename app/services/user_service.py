# app/services/user_service.py

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.common.exceptions import PhoneNumberTakenError, UserNotFoundError
from app.models.user import User, UserCreate

logger = logging.getLogger(__name__)


class UserService:

    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: int) -> User:
        user = self.db.get(User, user_id)
        if user is None:
            raise UserNotFoundError()
        return user

    def create_user(self, user_in: UserCreate) -> User:
        db_user = User(**user_in.model_dump())
        self.db.add(db_user)
        # phone_number is unique
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning("phone number already registered: %s", exc.orig)
            raise PhoneNumberTakenError() from exc
        self.db.refresh(db_user)
        logger.info("created user %s", db_user.id)
        return db_user
