from typing import List, Optional
from sqlmodel import Session, select

from domain.models.track import Track, INT64_MIN, INT64_MAX

def fits_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX

class TrackRepository:
    def __init__(self, session: Session):
        self.session = session

    def find_all(self) -> List[Track]:
        return self.session.exec(select(Track).order_by(Track.track_id)).all()

    def get_by_id(self, track_id: int) -> Optional[Track]:
        # no stored row can carry an id SQLite cannot represent
        if not fits_int64(track_id):
            return None
        return self.session.get(Track, track_id)

    def create(self, track: Track) -> Track:
        self.session.add(track)
        self.session.commit()
        self.session.refresh(track)
        return track

    def update(self, track: Track) -> Track:
        self.session.add(track)
        self.session.commit()
        self.session.refresh(track)
        return track

    def delete_by_id(self, track_id: int) -> bool:
        """Hard delete. Returns False when no row had that id."""
        track = self.get_by_id(track_id)
        if not track:
            return False
        self.session.delete(track)
        self.session.commit()
        return True
