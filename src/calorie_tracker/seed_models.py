"""Pydantic models for food catalog files."""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from calorie_tracker.domain.foods import NutritionRecord


class FoodPayload(BaseModel):
    """One food entry as written in a catalog JSON file."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str = ""
    kcal_per_100g: float
    protein_g: float
    carb_g: float
    fat_g: float
    tags: list[str] = Field(default_factory=list)
    image_url: str = Field(default="", alias="imageUrl")

    def to_record(self) -> NutritionRecord:
        """Convert the payload into a domain record."""
        return NutritionRecord(
            id=self.id,
            name=self.name,
            kcal_per_100g=self.kcal_per_100g,
            protein_g=self.protein_g,
            carb_g=self.carb_g,
            fat_g=self.fat_g,
            tags=frozenset(self.tags),
            image_url=self.image_url or None,
        )


_CATALOG_ADAPTER = TypeAdapter(list[FoodPayload])


def parse_catalog(raw: bytes | str) -> list[NutritionRecord]:
    """Parse a JSON array of foods. Raises pydantic.ValidationError."""
    return [payload.to_record() for payload in _CATALOG_ADAPTER.validate_json(raw)]
