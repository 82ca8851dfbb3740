"""Firestore implementation of the food catalog."""

from dataclasses import dataclass

from firebase_admin import firestore
from google.api_core import exceptions as google_exceptions

from calorie_tracker.domain.foods import NutritionRecord, UpsertStatus
from calorie_tracker.errors import StoreUnavailable
from calorie_tracker.services.foods import FoodRepository


@dataclass
class FirestoreFoodRepository(FoodRepository):
    """Firestore-backed repository for food reference documents."""

    client: firestore.Client
    collection: str = "foods"

    def upsert_food(self, record: NutritionRecord) -> UpsertStatus:
        """Create the document with a server timestamp, or merge into it."""
        ref = self.client.collection(self.collection).document(record.id)
        document = to_document(record)
        try:
            try:
                ref.create({**document, "createdAt": firestore.SERVER_TIMESTAMP})
            except google_exceptions.AlreadyExists:
                ref.set(document, merge=True)
                return UpsertStatus.UPDATED
        except google_exceptions.GoogleAPIError as exc:
            raise StoreUnavailable(record.id, exc) from exc
        return UpsertStatus.CREATED


def to_document(record: NutritionRecord) -> dict[str, object]:
    """Serialize a record into the document shape the mobile app reads."""
    return {
        "id": record.id,
        "name": record.name,
        "kcal_per_100g": record.kcal_per_100g,
        "protein_g": record.protein_g,
        "carb_g": record.carb_g,
        "fat_g": record.fat_g,
        "tags": sorted(record.tags),
        "imageUrl": record.image_url or "",
    }
