from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from movie_companion.domain.exceptions import RepositoryError
from movie_companion.domain.models.user import User as DomainUser
from movie_companion.domain.ports.repositories.user_repository import UserRepository
from movie_companion.infrastructure.persistence.models import User as SQLUser


class SQLAlchemyUserRepository(UserRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_user: SQLUser) -> DomainUser:
        return DomainUser(
            id=sql_user.id,
            name=sql_user.name,
            email=sql_user.email,
            password_hash=sql_user.password_hash,
            created_at=sql_user.created_at,
        )

    async def create(self, user: DomainUser) -> DomainUser:
        sql_user = SQLUser(name=user.name, email=user.email, password_hash=user.password_hash)
        try:
            self.session.add(sql_user)
            await self.session.commit()
            await self.session.refresh(sql_user)
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise RepositoryError(f"Could not create user {user.email}") from e
        return self._to_domain(sql_user)

    async def get_by_id(self, user_id: int) -> Optional[DomainUser]:
        sql_user = await self.session.scalar(select(SQLUser).where(SQLUser.id == user_id))
        return self._to_domain(sql_user) if sql_user else None

    async def get_by_email(self, email: str) -> Optional[DomainUser]:
        sql_user = await self.session.scalar(select(SQLUser).where(SQLUser.email == email))
        return self._to_domain(sql_user) if sql_user else None
