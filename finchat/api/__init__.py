"""HTTP API: routers, dependencies and error rendering."""
