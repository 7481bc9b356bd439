"""In-process collaborator adapters used by the CLI."""
