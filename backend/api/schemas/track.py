from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from domain.models.track import INT64_MIN, INT64_MAX

# Wire format is camelCase (trackId, songTitle, ...); snake_case is accepted on input too.
CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

class TrackCreate(BaseModel):
    """
    Create payload. Required fields are checked by the app service, not here,
    so that a missing field is reported as a 400 with a single message.
    """
    model_config = CAMEL_CONFIG

    song_title: Optional[str] = None
    artist_name: Optional[str] = None
    album_name: Optional[str] = None
    genre: Optional[str] = None
    duration: Optional[int] = Field(default=None, ge=INT64_MIN, le=INT64_MAX)
    release_year: Optional[int] = Field(default=None, ge=INT64_MIN, le=INT64_MAX)

class TrackUpdate(BaseModel):
    model_config = CAMEL_CONFIG

    song_title: Optional[str] = None
    artist_name: Optional[str] = None
    album_name: Optional[str] = None
    genre: Optional[str] = None
    duration: Optional[int] = Field(default=None, ge=INT64_MIN, le=INT64_MAX)
    release_year: Optional[int] = Field(default=None, ge=INT64_MIN, le=INT64_MAX)

class TrackRead(BaseModel):
    model_config = CAMEL_CONFIG

    track_id: int
    song_title: str
    artist_name: str
    album_name: str
    genre: str
    duration: Optional[int] = None
    release_year: Optional[int] = None

class MessageResponse(BaseModel):
    message: str

class ErrorResponse(BaseModel):
    error: str
