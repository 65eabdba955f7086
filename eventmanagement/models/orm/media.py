from datetime import datetime
from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from eventmanagement.models.account import NullAccount
from eventmanagement.models.media import Media
from eventmanagement.models.orm.base import Base


class MediaORM(Base):
    """ORM for a media file attached to an event.

    Every entry of `Event.get_media()` is stored as its own row, duplicates included.
    """

    __tablename__ = "event_media"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    name: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text)
    path: Mapped[str] = mapped_column(String(500))
    size: Mapped[int] = mapped_column(Integer)
    extension: Mapped[str] = mapped_column(String(20))
    created_by: Mapped[int] = mapped_column(Integer)
    created_at: Mapped[datetime] = mapped_column(DateTime)
    event_id: Mapped[int] = mapped_column(
        ForeignKey("event.id", ondelete="CASCADE"), index=True, init=False
    )

    event: Mapped["EventORM"] = relationship(back_populates="media", default=None) # type: ignore

    @classmethod
    def from_media(cls, media: Media):
        return cls(
            name=media.name,
            description=media.description,
            path=media.path,
            size=media.size,
            extension=media.extension,
            created_by=media.created_by.id,
            created_at=media.created_at,
        )

    def to_media(self) -> Media:
        return Media(
            id=self.id,
            name=self.name,
            description=self.description,
            path=self.path,
            size=self.size,
            extension=self.extension,
            created_by=NullAccount(self.created_by),
            created_at=self.created_at,
        )
