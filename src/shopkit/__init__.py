"""shopkit: storefront business rules and their collaborators."""

__version__ = "0.1.0"
