from sqlmodel import Field

from .base import BaseModelDB


class Cours(BaseModelDB, table=True):
    titre: str = Field(index=True)
