"""ORM Models — persistence shapes for the database counter backend."""
