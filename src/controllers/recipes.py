"""
Recipes screen controller.

The backend has no recipe endpoints, so the catalogue lives on the client
and new recipes are only added locally.
"""
from src.controllers.base import ViewController, matches_search
from src.data import fallback_data
from src.data.models import Recipe
from src.services.fetchers import Ok

RECIPE_TABS = ("all", "popular", "main", "appetizers", "desserts")
_TAB_CATEGORY = {"main": "Main Course", "appetizers": "Appetizer", "desserts": "Dessert"}


def filter_recipes(recipes, search_term, tab):
    def in_tab(recipe):
        if tab == "popular":
            return recipe.popular
        category = _TAB_CATEGORY.get(tab)
        return category is None or recipe.category == category

    return [
        recipe for recipe in recipes
        if matches_search(search_term, recipe.name, recipe.category) and in_tab(recipe)
    ]


class RecipesController(ViewController):
    name = "recipes"
    empty_message = "No recipes found."
    required_fields = ("name", "category")

    def __init__(self, client=None, prober=None):
        super().__init__(client, prober)
        self.catalogue = fallback_data.sample_recipes()
        self.search_term = ""
        self.active_tab = "all"

    def default_form(self):
        return {"name": "", "category": "Main Course", "prep_time": "", "description": ""}

    def refresh(self):
        # local data only; no availability check applies
        token = self.scope.begin()
        return self.apply_result(token, self.load())

    def load(self):
        return Ok(list(self.catalogue))

    def fallback(self):
        return fallback_data.sample_recipes()

    def set_search(self, search_term):
        self.search_term = search_term or ""

    def set_tab(self, tab):
        self.active_tab = tab if tab in RECIPE_TABS else "all"

    def visible_recipes(self):
        return filter_recipes(self.data or [], self.search_term, self.active_tab)

    def _store_recipe(self, payload):
        try:
            prep_time = int(payload.get("prep_time") or 0)
        except ValueError:
            prep_time = 0
        recipe = Recipe(
            id=f"recipe{len(self.catalogue) + 1}",
            name=payload["name"].strip(),
            category=payload["category"],
            prep_time=prep_time,
            ingredients=0,
            last_used="Never",
            popular=False,
            description=payload.get("description") or "",
        )
        self.catalogue.append(recipe)
        return Ok(recipe)

    def add_recipe(self):
        name = self.form.get("name")
        return self.submit_form(
            self._store_recipe,
            success_message=f"{name} has been added to your recipes",
            failure_message="Failed to add recipe",
        )
