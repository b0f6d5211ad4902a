class RepoError(Exception):
    """Base class for repository-level errors."""

    pass


# ------------------------- CATALOG -------------------------


class CatalogLoadError(RepoError):
    """Raised when the bundled catalog file is missing or malformed."""

    pass
