"""Static food catalog with search and add-to-log."""

from dataclasses import dataclass

from food_tracker.domain.catalog import CatalogFood
from food_tracker.domain.meals import FoodEntry, MealType
from food_tracker.errors import NotFoundError
from food_tracker.services.meals import MealStore, PersistResult

ALL_CATEGORIES = "All"

CATEGORIES: tuple[str, ...] = (
    "Protein",
    "Grains",
    "Vegetables",
    "Fruits",
    "Dairy",
    "Nuts",
)

CATALOG_FOODS: tuple[CatalogFood, ...] = (
    CatalogFood(1, "Grilled Chicken Breast", 231, 43.5, 0, 5, "Protein", "100g"),
    CatalogFood(2, "Brown Rice", 111, 2.6, 23, 0.9, "Grains", "100g"),
    CatalogFood(3, "Broccoli", 34, 2.8, 7, 0.4, "Vegetables", "100g"),
    CatalogFood(4, "Greek Yogurt", 59, 10, 3.6, 0.4, "Dairy", "100g"),
    CatalogFood(5, "Banana", 89, 1.1, 23, 0.3, "Fruits", "1 medium"),
    CatalogFood(6, "Almonds", 579, 21, 22, 50, "Nuts", "100g"),
    CatalogFood(7, "Salmon Fillet", 208, 25, 0, 12, "Protein", "100g"),
    CatalogFood(8, "Sweet Potato", 86, 1.6, 20, 0.1, "Vegetables", "100g"),
)


@dataclass(frozen=True)
class LoggedFood:
    """Entry created from a catalog food."""

    entry: FoodEntry
    persisted: PersistResult


@dataclass
class FoodCatalogService:
    """Read-only catalog that logs foods into the meal store."""

    store: MealStore
    foods: tuple[CatalogFood, ...] = CATALOG_FOODS

    def categories(self) -> list[str]:
        """Return the category filter options, starting with All."""
        return [ALL_CATEGORIES, *CATEGORIES]

    def search(
        self, term: str | None = None, category: str | None = None
    ) -> list[CatalogFood]:
        """Filter by case-insensitive name substring and exact category."""
        results = list(self.foods)
        if term:
            needle = term.lower()
            results = [food for food in results if needle in food.name.lower()]
        if category and category != ALL_CATEGORIES:
            results = [food for food in results if food.category == category]
        return results

    def get_food(self, food_id: int) -> CatalogFood | None:
        """Return a catalog food by id."""
        for food in self.foods:
            if food.id == food_id:
                return food
        return None

    def add_to_log(self, food_id: int, meal: MealType = "snack") -> LoggedFood:
        """Log one serving of a catalog food."""
        food = self.get_food(food_id)
        if food is None:
            raise NotFoundError(f"Food {food_id} is not in the catalog")
        entry = FoodEntry(
            id=self.store.next_entry_id(),
            name=food.name,
            calories=food.calories,
            protein=food.protein,
            carbs=food.carbs,
            fat=food.fat,
            time=self.store.current_time_label(),
            meal=meal,
        )
        return LoggedFood(entry=entry, persisted=self.store.add_meal(entry))
