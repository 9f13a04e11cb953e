"""Users repository — data access layer."""

from sqlalchemy.orm import sessionmaker

from api.users.orm.user_model import UserModel


def is_enabled(sessions: sessionmaker, identifier: str) -> bool:
    with sessions() as session:
        return (
            session.query(UserModel.id)
            .filter(UserModel.identifier == identifier, UserModel.enabled.is_(True))
            .first()
            is not None
        )


def create(sessions: sessionmaker, identifier: str, enabled: bool = True) -> int:
    with sessions() as session:
        model = UserModel(identifier=identifier, enabled=enabled)
        session.add(model)
        session.commit()
        return model.id
