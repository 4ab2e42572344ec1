"""In-memory development backend serving the site API contract."""
