"""Optional adapters: storage column mapping and render-safe text."""
