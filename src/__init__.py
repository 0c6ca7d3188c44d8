"""Source package for the yearly activity statistics service."""
