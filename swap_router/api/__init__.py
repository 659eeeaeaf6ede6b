"""HTTP API for dry-running swap legs and routes."""
