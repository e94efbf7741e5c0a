"""Business logic for speakers."""

from typing import List

from ..schemas.speaker import SpeakerBase, SpeakerRead
from .base import CollectionService
from .validation import validate_speaker


class SpeakerService(CollectionService[SpeakerRead]):
    """Service for managing speakers.

    Deleting a speaker does not touch agenda items that reference it;
    those items simply stop listing the speaker.
    """

    collection_name = "speakers"
    entity_name = "Speaker"
    read_model = SpeakerRead

    def validate(self, payload: SpeakerBase, partial: bool) -> List[str]:
        return validate_speaker(payload, partial=partial)
