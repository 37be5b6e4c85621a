# pixela/api/mixin/__init__.py

"""Per-resource method groups combined into PixelaClient."""
