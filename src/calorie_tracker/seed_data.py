"""Built-in Vietnamese food catalog used to seed the store."""

from calorie_tracker.domain.foods import NutritionRecord


def _food(  # noqa: PLR0913
    food_id: str,
    name: str,
    kcal: float,
    protein: float,
    carb: float,
    fat: float,
    *tags: str,
) -> NutritionRecord:
    return NutritionRecord(
        id=food_id,
        name=name,
        kcal_per_100g=kcal,
        protein_g=protein,
        carb_g=carb,
        fat_g=fat,
        tags=frozenset(tags),
    )


SEED_FOODS: tuple[NutritionRecord, ...] = (
    _food("pho", "Phở bò", 120, 7, 10, 4, "soup", "beef"),
    _food("buncha", "Bún chả", 210, 10, 20, 10, "grill"),
    _food("banhmi", "Bánh mì", 260, 8, 45, 6, "bread"),
    _food("comtam", "Cơm tấm", 200, 7, 40, 3, "rice"),
    _food("goicuon", "Gỏi cuốn", 95, 3, 12, 2, "fresh"),
    _food("bunbo", "Bún bò Huế", 150, 8, 18, 5, "soup"),
    _food("chaoluc", "Cháo lòng", 85, 6, 12, 1, "porridge"),
    _food("ca", "Cá kho", 180, 20, 0, 10, "fish"),
    _food("ga", "Gà luộc", 165, 31, 0, 4, "chicken"),
    _food("cha", "Chả giò", 250, 6, 30, 10, "fried"),
    _food("xoi", "Xôi", 200, 5, 45, 2, "rice"),
    _food("bunthitnuong", "Bún thịt nướng", 230, 9, 28, 8, "grill"),
    _food("canh", "Canh chua", 40, 2, 6, 1, "soup"),
    _food("nem", "Nem rán", 240, 7, 28, 9, "fried"),
    _food("bot", "Bột chiên", 260, 6, 33, 11, "street"),
    _food("che", "Chè", 150, 2, 30, 2, "dessert"),
    _food("banhcuon", "Bánh cuốn", 140, 4, 22, 3, "rice"),
    _food("banhxeo", "Bánh xèo", 270, 8, 28, 12, "pan"),
    _food("rau", "Rau luộc", 25, 2, 5, 0, "veg"),
    _food("mut", "Mứt", 300, 0, 75, 0, "sweet"),
    _food("sua", "Sữa chua", 60, 3, 8, 1, "dairy"),
    _food("thitbo", "Thịt bò", 250, 26, 0, 15, "beef"),
    _food("thitheo", "Thịt heo", 242, 25, 0, 14, "pork"),
    _food("dua", "Dưa leo", 15, 0.7, 3, 0, "veg"),
    _food("trung", "Trứng luộc", 155, 13, 1, 11, "egg"),
    _food("sushi", "Sushi (viet style)", 130, 5, 20, 2, "rice"),
    _food("muc", "Mực nướng", 95, 15, 1, 2, "seafood"),
    _food("tom", "Tôm", 99, 24, 0, 0.3, "seafood"),
)
