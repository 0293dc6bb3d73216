from typing import List, Optional
from sqlmodel import Session

from domain.models.track import Track
from infra.repositories.track_repository import TrackRepository
from api.schemas.track import TrackCreate, TrackUpdate

REQUIRED_FIELDS = ("song_title", "artist_name", "album_name", "genre")
REQUIRED_FIELDS_MESSAGE = "songTitle, artistName, albumName, and genre are required fields"

class MissingFieldsError(ValueError):
    pass

class TrackAppService:
    def __init__(self, session: Session):
        self.session = session
        self.repository = TrackRepository(session)

    def get_tracks(self) -> List[Track]:
        return self.repository.find_all()

    def get_track(self, track_id: int) -> Optional[Track]:
        return self.repository.get_by_id(track_id)

    @staticmethod
    def validate_create(payload: TrackCreate) -> None:
        # falsy check: None and "" both count as missing
        if not all(getattr(payload, name) for name in REQUIRED_FIELDS):
            raise MissingFieldsError(REQUIRED_FIELDS_MESSAGE)

    def create_track(self, payload: TrackCreate) -> Track:
        track = Track(**payload.model_dump())
        return self.repository.create(track)

    def update_track(self, track_id: int, payload: TrackUpdate) -> Optional[Track]:
        """
        Partial update. A field overrides the stored value whenever it is
        present and not null, so 0 and "" are applied (unlike create).
        """
        track = self.repository.get_by_id(track_id)
        if not track:
            return None

        for key, value in payload.model_dump(exclude_none=True).items():
            setattr(track, key, value)

        return self.repository.update(track)

    def delete_track(self, track_id: int) -> bool:
        return self.repository.delete_by_id(track_id)
