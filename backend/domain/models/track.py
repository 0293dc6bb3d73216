from typing import Optional
from sqlmodel import Field, SQLModel

# SQLite INTEGER is a signed 64-bit value
INT64_MIN = -2**63
INT64_MAX = 2**63 - 1

class Track(SQLModel, table=True):
    __tablename__ = "tracks"
    """
    A single song entry in the library.
    """
    track_id: Optional[int] = Field(default=None, primary_key=True)

    song_title: str = Field(nullable=False)
    artist_name: str = Field(nullable=False)
    album_name: str = Field(nullable=False)
    genre: str = Field(nullable=False)

    duration: Optional[int] = Field(default=None)  # seconds
    release_year: Optional[int] = Field(default=None)
