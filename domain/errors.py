class RecipeAppError(Exception):
    pass


class RecipeNotFound(RecipeAppError):
    pass


class UserNotFound(RecipeAppError):
    pass


class RecipeSourceError(RecipeAppError):
    """The recipe data source could not be reached or returned garbage."""
