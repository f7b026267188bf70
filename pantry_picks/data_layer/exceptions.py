"""Custom exceptions for the recipe catalog and configuration."""


class CatalogError(Exception):
    """Base class for recipe catalog failures."""


class RecipeValidationError(CatalogError):
    """Raised when a catalog record breaks a recipe invariant."""

    def __init__(self, recipe_id: str, field: str, message: str):
        """Initialize exception with the offending recipe and field.

        Args:
            recipe_id: ID of the recipe being loaded ("<unknown>" if missing)
            field: Name of the field that failed validation
            message: Human-readable description of the problem
        """
        self.recipe_id = recipe_id
        self.field = field
        super().__init__(f"Recipe '{recipe_id}': invalid '{field}': {message}")


class RecipeNotFoundError(CatalogError):
    """Raised when a recipe ID is not present in the catalog."""

    def __init__(self, recipe_id: str):
        self.recipe_id = recipe_id
        super().__init__(f"Recipe '{recipe_id}' not found in catalog")


class PreferencesError(Exception):
    """Raised when the preferences YAML holds an unusable value."""
