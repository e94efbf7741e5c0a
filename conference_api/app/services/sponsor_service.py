"""Business logic for sponsors."""

from typing import List

from ..schemas.sponsor import SponsorBase, SponsorRead
from .base import CollectionService
from .validation import validate_sponsor


class SponsorService(CollectionService[SponsorRead]):
    collection_name = "sponsors"
    entity_name = "Sponsor"
    read_model = SponsorRead

    def validate(self, payload: SponsorBase, partial: bool) -> List[str]:
        return validate_sponsor(payload, partial=partial)
