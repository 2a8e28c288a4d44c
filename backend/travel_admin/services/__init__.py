"""CRUD, list queries and tour ordering."""
