"""In-memory resource model: entries, bundles, modules, and packs."""
