"""Database models using SQLModel."""

from sqlmodel import Field, SQLModel


class AuthCode(SQLModel, table=True):
    """A pending authentication code bound to a game player."""

    __tablename__ = "auth_codes"

    auth_code: str = Field(primary_key=True, unique=True, nullable=False)
    player_id: str = Field(unique=True, index=True, nullable=False)
