"""Exchange formats for resource packs."""
